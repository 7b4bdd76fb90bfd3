"""Storage of categories and items in the inventory database."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any

from inventaris.models import Category, InventoryError, Item, NotFoundError

_CATEGORY_NOT_FOUND = "kategori tidak ditemukan"
_ITEM_NOT_FOUND = "barang tidak ditemukan"


@contextmanager
def _database_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        raise InventoryError(str(exc)) from exc


class _Table:
    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def _fetch(self, query: str, params: tuple[Any, ...] = ()) -> list[tuple[Any, ...]]:
        with _database_errors():
            return self._connection.execute(query, params).fetchall()

    def _write(self, query: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        with _database_errors(), self._connection:
            return self._connection.execute(query, params)


def _date_text(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def _item_from_row(row: tuple[Any, ...]) -> Item:
    item_id, name, category_id, price, purchase_date = row
    return Item(
        id=item_id,
        name=name,
        category_id=category_id,
        price=float(price),
        purchase_date=date.fromisoformat(purchase_date),
    )


class CategoryRepository(_Table):
    """Reads and writes the categories table."""

    def all(self) -> list[Category]:
        rows = self._fetch("SELECT id, name, description FROM categories ORDER BY id")
        return [Category(*row) for row in rows]

    def create(self, category: Category) -> int:
        cursor = self._write(
            "INSERT INTO categories (name, description) VALUES (?, ?)",
            (category.name, category.description),
        )
        return cursor.lastrowid

    def get(self, category_id: int) -> Category:
        rows = self._fetch(
            "SELECT id, name, description FROM categories WHERE id = ?", (category_id,)
        )
        if not rows:
            raise NotFoundError(_CATEGORY_NOT_FOUND)
        return Category(*rows[0])

    def update(self, category_id: int, category: Category) -> None:
        cursor = self._write(
            "UPDATE categories SET name = ?, description = ? WHERE id = ?",
            (category.name, category.description, category_id),
        )
        if cursor.rowcount == 0:
            raise NotFoundError(_CATEGORY_NOT_FOUND)

    def delete(self, category_id: int) -> None:
        cursor = self._write("DELETE FROM categories WHERE id = ?", (category_id,))
        if cursor.rowcount == 0:
            raise NotFoundError(_CATEGORY_NOT_FOUND)

    def delete_by_name(self, name: str) -> None:
        self._write("DELETE FROM categories WHERE name = ?", (name,))


class ItemRepository(_Table):
    """Reads and writes the items table."""

    def all(self) -> list[Item]:
        rows = self._fetch(
            "SELECT id, name, category_id, price, purchase_date FROM items ORDER BY id"
        )
        return [_item_from_row(row) for row in rows]

    def create(self, item: Item) -> int:
        cursor = self._write(
            "INSERT INTO items (name, category_id, price, purchase_date) VALUES (?, ?, ?, ?)",
            (item.name, item.category_id, item.price, _date_text(item.purchase_date)),
        )
        return cursor.lastrowid

    def get(self, item_id: int) -> Item:
        rows = self._fetch(
            "SELECT id, name, category_id, price, purchase_date FROM items WHERE id = ?",
            (item_id,),
        )
        if not rows:
            raise NotFoundError(_ITEM_NOT_FOUND)
        return _item_from_row(rows[0])

    def update(self, item_id: int, item: Item) -> None:
        cursor = self._write(
            "UPDATE items SET name = ?, category_id = ?, price = ?, purchase_date = ? "
            "WHERE id = ?",
            (
                item.name,
                item.category_id,
                item.price,
                _date_text(item.purchase_date),
                item_id,
            ),
        )
        if cursor.rowcount == 0:
            raise NotFoundError(_ITEM_NOT_FOUND)

    def delete(self, item_id: int) -> None:
        cursor = self._write("DELETE FROM items WHERE id = ?", (item_id,))
        if cursor.rowcount == 0:
            raise NotFoundError(_ITEM_NOT_FOUND)

    def search_by_name(self, keyword: str) -> list[Item]:
        """Items whose name contains the keyword, ignoring case, with their category."""
        rows = self._fetch(
            """
            SELECT i.id, i.name, i.category_id, i.price, i.purchase_date,
                   c.name, c.description
            FROM items i
            JOIN categories c ON i.category_id = c.id
            WHERE LOWER(i.name) LIKE LOWER(?)
            ORDER BY i.id
            """,
            (f"%{keyword}%",),
        )
        items = []
        for *item_columns, category_name, category_description in rows:
            item = _item_from_row(tuple(item_columns))
            item.category = Category(
                id=item.category_id, name=category_name, description=category_description
            )
            items.append(item)
        return items

    def delete_by_name(self, name: str) -> None:
        self._write("DELETE FROM items WHERE name = ?", (name,))