import pytest

from inventaris.database import (
    DEFAULT_DB_PATH,
    connect,
    database_path,
    get_env,
    init_db,
)
from inventaris.models import InventoryError


def _tables(connection):
    rows = connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {name for (name,) in rows}


def test_get_env_returns_set_value(monkeypatch):
    monkeypatch.setenv("INVENTARIS_SAMPLE", "dari-env")
    assert get_env("INVENTARIS_SAMPLE", "bawaan") == "dari-env"


def test_get_env_falls_back_when_unset(monkeypatch):
    monkeypatch.delenv("INVENTARIS_SAMPLE", raising=False)
    assert get_env("INVENTARIS_SAMPLE", "bawaan") == "bawaan"


def test_get_env_treats_empty_as_unset(monkeypatch):
    monkeypatch.setenv("INVENTARIS_SAMPLE", "")
    assert get_env("INVENTARIS_SAMPLE", "bawaan") == "bawaan"


def test_database_path_default(monkeypatch):
    monkeypatch.delenv("DB_PATH", raising=False)
    assert database_path() == DEFAULT_DB_PATH


def test_database_path_from_env(monkeypatch, tmp_path):
    target = str(tmp_path / "stok.db")
    monkeypatch.setenv("DB_PATH", target)
    assert database_path() == target


def test_connect_enables_foreign_keys():
    connection = connect(":memory:")
    try:
        assert connection.execute("PRAGMA foreign_keys").fetchone()[0] == 1
    finally:
        connection.close()


def test_init_db_creates_tables():
    connection = init_db(":memory:")
    try:
        assert {"categories", "items"} <= _tables(connection)
    finally:
        connection.close()


def test_init_db_uses_env_path(monkeypatch, tmp_path):
    target = tmp_path / "env.db"
    monkeypatch.setenv("DB_PATH", str(target))
    connection = init_db()
    try:
        assert {"categories", "items"} <= _tables(connection)
    finally:
        connection.close()
    assert target.exists()

    reopened = connect(target)
    try:
        assert {"categories", "items"} <= _tables(reopened)
    finally:
        reopened.close()


def test_init_db_keeps_existing_data(tmp_path):
    target = tmp_path / "inventaris.db"
    first = init_db(target)
    with first:
        first.execute("INSERT INTO categories (name, description) VALUES ('ATK', 'Alat tulis')")
    first.close()

    second = init_db(target)
    try:
        names = [name for (name,) in second.execute("SELECT name FROM categories")]
        assert names == ["ATK"]
    finally:
        second.close()


def test_connect_to_directory_fails(tmp_path):
    with pytest.raises(InventoryError, match="gagal membuka koneksi"):
        connect(tmp_path)