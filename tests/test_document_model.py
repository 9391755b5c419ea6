from __future__ import annotations

import pytest

from csv_engine.document import (
    CellEdit,
    CsvDocument,
    CursorState,
    EditHistory,
    GridSnapshot,
    OutOfBoundsError,
)


def make_document(rows: list[list[str]] | None = None) -> CsvDocument:
    return CsvDocument.from_rows(rows if rows is not None else [["a", "b"], ["c", "d"]])


def test_new_document_is_empty_and_clean() -> None:
    document = CsvDocument()

    assert document.row_count == 0
    assert document.column_count == 0
    assert document.is_modified is False
    assert document.identity is None
    assert document.delimiter == ","


def test_modified_tracks_checkpoint_comparison() -> None:
    document = make_document()

    document.set_cell(0, 0, "z")
    assert document.is_modified is True

    document.set_cell(0, 0, "a")
    assert document.is_modified is False


def test_checkpoint_is_not_aliased_to_source_rows() -> None:
    source = [["x"]]
    document = CsvDocument.from_rows(source)

    source[0][0] = "mutated"
    document.set_cell(0, 0, "y")

    assert document.checkpoint() == (("x",),)
    assert document.snapshot() == (("y",),)


def test_mark_saved_moves_checkpoint() -> None:
    document = make_document()
    document.set_cell(1, 1, "D")

    document.mark_saved(delimiter="\t", identity="out.tsv")

    assert document.is_modified is False
    assert document.delimiter == "\t"
    assert document.identity == "out.tsv"
    document.set_cell(1, 1, "d")
    assert document.is_modified is True


def test_reset_replaces_everything() -> None:
    document = make_document()
    document.set_cell(0, 0, "z")

    document.reset([["1", "2", "3"]], identity="f.csv", delimiter=",")

    assert document.snapshot() == (("1", "2", "3"),)
    assert document.is_modified is False
    assert document.identity == "f.csv"


def test_cell_access_is_bounds_checked() -> None:
    document = make_document()

    with pytest.raises(OutOfBoundsError) as info:
        document.get_cell(2, 0)
    assert info.value.cell == (2, 0)

    with pytest.raises(OutOfBoundsError):
        document.set_cell(0, -1, "x")

    assert document.contains((1, 1)) is True
    assert document.contains((1, 2)) is False


def test_invalid_delimiter_rejected() -> None:
    with pytest.raises(ValueError):
        CsvDocument.from_rows([["a"]], delimiter=";")


def test_history_pops_snapshots_before_cell_edits() -> None:
    history = EditHistory()
    history.push_cell_edit(0, 0, "old")
    history.push_snapshot([["before", "reload"]])
    history.push_cell_edit(1, 1, "later")

    first = history.pop()
    second = history.pop()
    third = history.pop()

    assert isinstance(first, GridSnapshot)
    assert first.rows == (("before", "reload"),)
    assert second == CellEdit(row=1, col=1, old_value="later")
    assert third == CellEdit(row=0, col=0, old_value="old")
    assert history.pop() is None
    assert history.can_undo() is False


def test_history_snapshot_is_a_value_copy() -> None:
    history = EditHistory()
    rows = [["a"]]
    history.push_snapshot(rows)

    rows[0][0] = "b"

    snapshot = history.peek()
    assert isinstance(snapshot, GridSnapshot)
    assert snapshot.rows == (("a",),)


def test_history_clear_and_depths() -> None:
    history = EditHistory()
    history.push_cell_edit(0, 0, "x")
    history.push_snapshot([])

    assert history.cell_edit_depth == 1
    assert history.snapshot_depth == 1

    history.clear()

    assert history.can_undo() is False
    assert history.peek() is None


def test_cursor_move_clamps_to_grid() -> None:
    cursor = CursorState()

    assert cursor.move(5, 5, rows=3, cols=2) == (2, 1)
    assert cursor.move(-10, 0, rows=3, cols=2) == (0, 1)
    assert cursor.move(0, 0, rows=0, cols=0) == (0, 0)


def test_cursor_select_validates() -> None:
    cursor = CursorState()

    assert cursor.select(1, 1, rows=2, cols=2) == (1, 1)
    with pytest.raises(OutOfBoundsError):
        cursor.select(2, 0, rows=2, cols=2)
    assert cursor.cell == (1, 1)
