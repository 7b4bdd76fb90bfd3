"""Opening and preparing the inventory database."""

from __future__ import annotations

import os
import sqlite3

from inventaris.models import InventoryError

DEFAULT_DB_PATH = "inventory.db"

SCHEMA = """
CREATE TABLE IF NOT EXISTS categories (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT ''
);
CREATE TABLE IF NOT EXISTS items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    category_id INTEGER NOT NULL REFERENCES categories (id),
    price REAL NOT NULL,
    purchase_date TEXT NOT NULL
);
"""


def get_env(key: str, default: str) -> str:
    """Value of an environment variable, or the default when unset or empty."""
    return os.environ.get(key, "") or default


def database_path() -> str:
    """Location of the database file, taken from DB_PATH."""
    return get_env("DB_PATH", DEFAULT_DB_PATH)


def connect(path: str | os.PathLike[str] | None = None) -> sqlite3.Connection:
    """Open a connection with foreign keys enforced."""
    target = database_path() if path is None else path
    try:
        connection = sqlite3.connect(target)
        connection.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as exc:
        raise InventoryError(f"gagal membuka koneksi: {exc}") from exc
    return connection


def init_db(path: str | os.PathLike[str] | None = None) -> sqlite3.Connection:
    """Open the database and create its tables when missing."""
    connection = connect(path)
    try:
        connection.executescript(SCHEMA)
    except sqlite3.Error as exc:
        connection.close()
        raise InventoryError(f"gagal menyiapkan database: {exc}") from exc
    return connection