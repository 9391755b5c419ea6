"""Command-line front end for inspecting and editing CSV/TSV files."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from csv_engine.document import DocumentController, DocumentError
from csv_engine.grid import cell_ref, column_label, parse_cell_ref
from csv_engine.runtime.telemetry import configure


def _render_table(controller: DocumentController, out: TextIO) -> None:
    document = controller.document
    labels = controller.column_labels()
    rows = document.snapshot()
    gutter = len(str(len(rows)))
    widths = [
        max([len(label)] + [len(_display(row[col])) for row in rows])
        for col, label in enumerate(labels)
    ]
    header = " " * gutter + " | " + " | ".join(
        label.ljust(width) for label, width in zip(labels, widths)
    )
    out.write(header.rstrip() + "\n")
    for index, row in enumerate(rows, start=1):
        cells = " | ".join(
            _display(value).ljust(width) for value, width in zip(row, widths)
        )
        out.write(f"{str(index).rjust(gutter)} | {cells}".rstrip() + "\n")


def _display(value: str) -> str:
    return value.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")


def _cmd_show(controller: DocumentController, args: argparse.Namespace) -> int:
    controller.open(args.path)
    _render_table(controller, sys.stdout)
    return 0


def _cmd_info(controller: DocumentController, args: argparse.Namespace) -> int:
    controller.open(args.path)
    document = controller.document
    delimiter = "tab" if document.delimiter == "\t" else "comma"
    last = column_label(document.column_count - 1) if document.column_count else "-"
    sys.stdout.write(
        f"path: {document.identity}\n"
        f"delimiter: {delimiter}\n"
        f"rows: {document.row_count}\n"
        f"columns: {document.column_count} (A..{last})\n"
    )
    return 0


def _cmd_set(controller: DocumentController, args: argparse.Namespace) -> int:
    controller.open(args.path)
    row, col = parse_cell_ref(args.cell)
    ref = cell_ref(row, col)
    changed = controller.edit_cell(row, col, args.value)
    if args.output:
        target = controller.save_as(args.output)
    elif changed:
        target = controller.save()
    else:
        sys.stdout.write(f"{ref}: unchanged\n")
        return 0
    sys.stdout.write(f"{ref} -> {target}\n")
    return 0


def _cmd_convert(controller: DocumentController, args: argparse.Namespace) -> int:
    controller.open(args.source)
    target = controller.save_as(args.dest)
    delimiter = "tab" if controller.document.delimiter == "\t" else "comma"
    sys.stdout.write(f"wrote {target} ({delimiter})\n")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv-engine", description="Inspect and edit CSV/TSV files."
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="Telemetry preset (default: driven by CSV_ENGINE_* variables)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Print the grid with column labels")
    show.add_argument("path")
    show.set_defaults(handler=_cmd_show)

    info = commands.add_parser("info", help="Print delimiter and grid shape")
    info.add_argument("path")
    info.set_defaults(handler=_cmd_info)

    set_cell = commands.add_parser("set", help="Set one cell, e.g. B3, and save")
    set_cell.add_argument("path")
    set_cell.add_argument("cell")
    set_cell.add_argument("value")
    set_cell.add_argument(
        "--output", "-o", default=None, help="Write to this file instead of PATH"
    )
    set_cell.set_defaults(handler=_cmd_set)

    convert = commands.add_parser(
        "convert", help="Rewrite SOURCE as DEST; DEST's extension picks the delimiter"
    )
    convert.add_argument("source")
    convert.add_argument("dest")
    convert.set_defaults(handler=_cmd_convert)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.log_preset:
        configure(preset=args.log_preset)
    controller = DocumentController()
    try:
        return args.handler(controller, args)
    except DocumentError as exc:
        sys.stderr.write(f"csv-engine: {exc}\n")
        return 1
    except ValueError as exc:
        sys.stderr.write(f"csv-engine: {exc}\n")
        return 2


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
