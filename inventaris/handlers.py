"""Interactive console commands for the inventory."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import TextIO

from inventaris.depreciation import days_since
from inventaris.models import InventoryError
from inventaris.services import InventoryService

_CELL_PADDING = 2
_INTEGER = re.compile(r"[+-]?\d+")
_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def format_table(rows: Iterable[Sequence[object]]) -> str:
    """Lay out rows in columns separated by at least two spaces."""
    table = [[str(cell) for cell in row] for row in rows]
    widths: dict[int, int] = {}
    for row in table:
        for index, cell in enumerate(row[:-1]):
            widths[index] = max(widths.get(index, 0), len(cell))
    lines = []
    for row in table:
        if not row:
            lines.append("")
            continue
        padded = "".join(
            cell.ljust(widths[index] + _CELL_PADDING)
            for index, cell in enumerate(row[:-1])
        )
        lines.append(padded + row[-1])
    return "".join(line + "\n" for line in lines)


def _parse_int(text: str) -> int | None:
    text = text.strip()
    return int(text) if _INTEGER.fullmatch(text) else None


def _parse_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _parse_date(text: str) -> date | None:
    text = text.strip()
    if not _DATE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _format_number(value: float) -> str:
    """Shortest form of a float, switching to exponent notation from 1e+06."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(float(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = exponent + len(digits)
    exp10 = point - 1
    prefix = "-" if sign else ""
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


class Console:
    """Prompts for input, calls the service and prints the outcome."""

    def __init__(
        self,
        service: InventoryService,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        now: date | datetime | None = None,
    ) -> None:
        self.service = service
        self._input = sys.stdin if stdin is None else stdin
        self._output = sys.stdout if stdout is None else stdout
        self.now = now

    def _print(self, *values: object) -> None:
        print(*values, file=self._output)

    def _ask_line(self, prompt: str) -> str:
        self._output.write(prompt)
        return self._input.readline().strip()

    def _ask_token(self, prompt: str) -> str:
        self._output.write(prompt)
        words = self._input.readline().split()
        return words[0] if words else ""

    def _ask_id(self, prompt: str) -> int | None:
        value = _parse_int(self._ask_token(prompt))
        if value is None:
            self._print("ID tidak valid")
        return value

    # Categories

    def list_categories(self) -> None:
        try:
            categories = self.service.list_categories()
        except InventoryError as exc:
            self._print("Gagal mengambil data kategori:", exc)
            return
        rows = [("ID", "Nama", "Deskripsi")]
        rows += [(str(c.id), c.name, c.description) for c in categories]
        self._output.write(format_table(rows))

    def add_category(self) -> None:
        name = self._ask_line("Masukkan nama kategori: ")
        description = self._ask_line("Masukkan deskripsi kategori: ")
        try:
            self.service.add_category(name, description)
        except InventoryError as exc:
            self._print("Gagal menambahkan kategori:", exc)
        else:
            self._print("Kategori berhasil ditambahkan!")

    def detail_category(self) -> None:
        category_id = self._ask_id("Masukkan ID kategori: ")
        if category_id is None:
            return
        try:
            category = self.service.get_category_detail(category_id)
        except InventoryError as exc:
            self._print("Gagal:", exc)
            return
        self._print("ID:", category.id)
        self._print("Nama:", category.name)
        self._print("Deskripsi:", category.description)

    def edit_category(self) -> None:
        category_id = self._ask_id("Masukkan ID kategori: ")
        if category_id is None:
            return
        name = self._ask_line("Masukkan nama baru: ")
        description = self._ask_line("Masukkan deskripsi baru: ")
        try:
            self.service.edit_category(category_id, name, description)
        except InventoryError as exc:
            self._print("Gagal mengedit kategori:", exc)
        else:
            self._print("Kategori berhasil diubah.")

    def delete_category(self) -> None:
        category_id = self._ask_id("Masukkan ID kategori yang ingin dihapus: ")
        if category_id is None:
            return
        try:
            self.service.remove_category(category_id)
        except InventoryError as exc:
            self._print("Gagal menghapus kategori:", exc)
        else:
            self._print("Kategori berhasil dihapus.")

    # Items

    def list_items(self) -> None:
        try:
            items = self.service.list_items()
        except InventoryError as exc:
            self._print("Gagal mengambil data barang:", exc)
            return
        rows = [("ID", "Nama", "Kategori ID", "Harga", "Tanggal Beli", "Hari Pakai")]
        rows += [
            (
                str(item.id),
                item.name,
                str(item.category_id),
                f"{item.price:.2f}",
                item.purchase_date.isoformat(),
                str(days_since(item.purchase_date, self.now)),
            )
            for item in items
        ]
        self._output.write(format_table(rows))

    def _ask_item_fields(
        self, name_prompt: str, category_prompt: str, price_prompt: str, date_prompt: str
    ) -> tuple[str, int, float, date] | None:
        name = self._ask_line(name_prompt)
        category_id = _parse_int(self._ask_line(category_prompt)) or 0
        price = _parse_float(self._ask_line(price_prompt))
        purchase_date = _parse_date(self._ask_line(date_prompt))
        if purchase_date is None:
            self._print("Format tanggal salah")
            return None
        return name, category_id, price, purchase_date

    def add_item(self) -> None:
        fields = self._ask_item_fields(
            "Masukkan nama barang: ",
            "Masukkan ID kategori: ",
            "Masukkan harga barang: ",
            "Masukkan tanggal beli (yyyy-mm-dd): ",
        )
        if fields is None:
            return
        try:
            self.service.add_item(*fields)
        except InventoryError as exc:
            self._print("Gagal menambahkan barang:", exc)
        else:
            self._print("Barang berhasil ditambahkan!")

    def detail_item(self) -> None:
        item_id = self._ask_id("Masukkan ID barang: ")
        if item_id is None:
            return
        try:
            item = self.service.get_item_detail(item_id)
        except InventoryError as exc:
            self._print("Gagal:", exc)
            return
        self._print("ID:", item.id)
        self._print("Nama:", item.name)
        self._print("Kategori ID:", item.category_id)
        self._print("Harga:", _format_number(item.price))
        self._print("Tanggal Beli:", item.purchase_date.isoformat())

    def edit_item(self) -> None:
        item_id = _parse_int(self._ask_line("Masukkan ID barang: ")) or 0
        fields = self._ask_item_fields(
            "Nama baru: ",
            "ID kategori baru: ",
            "Harga baru: ",
            "Tanggal beli baru (yyyy-mm-dd): ",
        )
        if fields is None:
            return
        try:
            self.service.edit_item(item_id, *fields)
        except InventoryError as exc:
            self._print("Gagal mengedit barang:", exc)
        else:
            self._print("Barang berhasil diperbarui.")

    def delete_item(self) -> None:
        item_id = self._ask_id("Masukkan ID barang: ")
        if item_id is None:
            return
        try:
            self.service.remove_item(item_id)
        except InventoryError as exc:
            self._print("Gagal menghapus barang:", exc)
        else:
            self._print("Barang berhasil dihapus.")

    def search_items(self) -> None:
        keyword = self._ask_token("Masukkan kata kunci nama barang: ")
        try:
            items = self.service.search_items_by_name(keyword)
        except InventoryError as exc:
            self._print("Gagal mencari barang:", exc)
            return
        if not items:
            self._print("Barang tidak ditemukan.")
            return
        rows = [("ID", "Nama", "Harga", "Tgl Beli", "Kategori")]
        rows += [
            (
                str(item.id),
                item.name,
                f"{item.price:.2f}",
                item.purchase_date.isoformat(),
                item.category.name if item.category else "",
            )
            for item in items
        ]
        self._output.write(format_table(rows))

    # Reports

    def check_replacement(self) -> None:
        try:
            items = self.service.items_over_100_days(self.now)
        except InventoryError as exc:
            self._print("Gagal mendapatkan data barang:", exc)
            return
        if not items:
            self._print("Tidak ada barang yang perlu diganti.")
            return
        rows = [("ID", "Nama", "Hari Penggunaan", "Tanggal Beli")]
        rows += [
            (
                str(item.id),
                item.name,
                str(days_since(item.purchase_date, self.now)),
                item.purchase_date.isoformat(),
            )
            for item in items
        ]
        self._output.write(format_table(rows))

    def report_total_investment(self) -> None:
        try:
            total = self.service.total_investment_value(self.now)
        except InventoryError as exc:
            self._print("Gagal menghitung nilai investasi:", exc)
            return
        self._print(f"Total nilai investasi setelah depresiasi: Rp{total:.2f}")

    def report_item_by_id(self) -> None:
        item_id = self._ask_id("Masukkan ID barang: ")
        if item_id is None:
            return
        try:
            original, depreciated = self.service.item_investment_value(item_id, self.now)
        except InventoryError as exc:
            self._print("Gagal:", exc)
            return
        self._print(f"Nilai awal: Rp{original:.2f}")
        self._print(f"Nilai setelah depresiasi: Rp{depreciated:.2f}")