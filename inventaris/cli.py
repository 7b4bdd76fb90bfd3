"""Command-line entry point that routes ``-cmd`` to the console commands."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from contextlib import closing
from typing import TextIO

from inventaris.database import init_db
from inventaris.handlers import Console
from inventaris.models import InventoryError
from inventaris.services import InventoryService

CATEGORY_COMMANDS = {
    "add-category": Console.add_category,
    "list-category": Console.list_categories,
    "edit-category": Console.edit_category,
    "delete-category": Console.delete_category,
    "detail-category": Console.detail_category,
}

ITEM_COMMANDS = {
    "add-item": Console.add_item,
    "list-item": Console.list_items,
    "edit-item": Console.edit_item,
    "delete-item": Console.delete_item,
    "detail-item": Console.detail_item,
    "search-item": Console.search_items,
    "check-replacement": Console.check_replacement,
}

REPORT_COMMANDS = {
    "report-investment": Console.report_total_investment,
    "report-by-id": Console.report_item_by_id,
}

COMMANDS = {**CATEGORY_COMMANDS, **ITEM_COMMANDS, **REPORT_COMMANDS}


def show_help(out: TextIO | None = None) -> None:
    """Print the list of available commands."""
    out = sys.stdout if out is None else out
    sections = (
        ("Kategori:", CATEGORY_COMMANDS),
        ("Barang:", ITEM_COMMANDS),
        ("Laporan:", REPORT_COMMANDS),
    )
    lines = ["", "Usage: inventaris -cmd=<command>", ""]
    for title, commands in sections:
        lines.append(title)
        lines.append("  " + ", ".join(commands))
    out.write("\n".join(lines) + "\n")


def run_command(console: Console, command: str) -> None:
    """Run one named command on the console; unknown names raise ValueError."""
    try:
        action = COMMANDS[command]
    except KeyError:
        raise ValueError(f"unknown command: {command!r}") from None
    action(console)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="inventaris", add_help=False)
    parser.add_argument(
        "-cmd", "--cmd", dest="cmd", default="", help="Perintah yang ingin dijalankan"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to the database and run the command given with ``-cmd``."""
    out = sys.stdout
    try:
        connection = init_db()
    except InventoryError as exc:
        print("Gagal koneksi ke database:", exc, file=out)
        return 1
    print("Berhasil terkoneksi ke database 🎉", file=out)

    with closing(connection):
        args = _parser().parse_args(argv)
        command = args.cmd
        if not command:
            show_help(out)
            return 0
        console = Console(InventoryService(connection), stdout=out)
        try:
            run_command(console, command)
        except ValueError:
            print("Perintah tidak dikenali:", command, file=out)
            show_help(out)
    return 0