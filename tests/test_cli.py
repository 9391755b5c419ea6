from __future__ import annotations

from pathlib import Path

import pytest

from csv_engine.cli import main


def write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_show_prints_labels_and_rows(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = write(tmp_path / "t.csv", 'name,note\nann,"a,b"\n')

    assert main(["show", str(source)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0].split() == ["|", "A", "|", "B"]
    assert out[1].split(" | ") == ["1", "name", "note"]
    assert out[2].split(" | ") == ["2", "ann ", "a,b"]


def test_info_reports_shape(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "t.txt", "a\tb\tc\n1\t2\t3\n")

    assert main(["info", str(source)]) == 0

    out = capsys.readouterr().out
    assert "delimiter: tab" in out
    assert "rows: 2" in out
    assert "columns: 3 (A..C)" in out


def test_set_updates_file_in_place(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = write(tmp_path / "t.csv", "a,b\nc,d\n")

    assert main(["set", str(source), "B2", "x,y"]) == 0

    assert source.read_text(encoding="utf-8") == 'a,b\nc,"x,y"\n'
    assert "B2 ->" in capsys.readouterr().out


def test_set_echoes_normalised_cell_reference(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = write(tmp_path / "t.csv", "a,b\nc,d\n")

    assert main(["set", str(source), " b2 ", "z"]) == 0
    assert capsys.readouterr().out == f"B2 -> {source}\n"

    assert main(["set", str(source), "b2", "z"]) == 0
    assert capsys.readouterr().out == "B2: unchanged\n"


def test_set_unchanged_does_not_rewrite(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = write(tmp_path / "t.csv", "a;b\n")

    assert main(["set", str(source), "A1", "a;b"]) == 0

    assert source.read_text(encoding="utf-8") == "a;b\n"
    assert "unchanged" in capsys.readouterr().out


def test_set_with_output(tmp_path: Path) -> None:
    source = write(tmp_path / "t.csv", "a,b\n")
    target = tmp_path / "out.tsv"

    assert main(["set", str(source), "A1", "z", "--output", str(target)]) == 0

    assert target.read_text(encoding="utf-8") == "z\tb\n"
    assert source.read_text(encoding="utf-8") == "a,b\n"


def test_convert_picks_delimiter_from_destination(tmp_path: Path) -> None:
    source = write(tmp_path / "in.tsv", "a\tb,c\n")
    target = tmp_path / "out.csv"

    assert main(["convert", str(source), str(target)]) == 0

    assert target.read_text(encoding="utf-8") == 'a,"b,c"\n'


def test_errors_exit_non_zero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = write(tmp_path / "t.csv", "a\n")

    assert main(["show", str(tmp_path / "missing.csv")]) == 1
    assert main(["set", str(source), "C9", "x"]) == 1
    assert main(["set", str(source), "??", "x"]) == 2

    err = capsys.readouterr().err
    assert err.count("csv-engine:") == 3
