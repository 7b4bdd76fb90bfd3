"""Business rules for categories, items and investment reports."""

from __future__ import annotations

import sqlite3
from datetime import date, datetime

from inventaris.depreciation import calculate_depreciation, days_since
from inventaris.models import Category, Item, ValidationError
from inventaris.repository import CategoryRepository, ItemRepository

_EMPTY_CATEGORY_NAME = "nama kategori tidak boleh kosong"
_EMPTY_ITEM_NAME = "nama barang tidak boleh kosong"

REPLACEMENT_AGE_DAYS = 100


class InventoryService:
    """Validates requests and passes them on to the repositories."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.categories = CategoryRepository(connection)
        self.items = ItemRepository(connection)

    # Categories

    def list_categories(self) -> list[Category]:
        return self.categories.all()

    def add_category(self, name: str, description: str) -> int:
        if not name.strip():
            raise ValidationError(_EMPTY_CATEGORY_NAME)
        return self.categories.create(Category(name=name, description=description))

    def get_category_detail(self, category_id: int) -> Category:
        return self.categories.get(category_id)

    def edit_category(self, category_id: int, name: str, description: str) -> None:
        if not name.strip():
            raise ValidationError(_EMPTY_CATEGORY_NAME)
        self.categories.update(category_id, Category(name=name, description=description))

    def remove_category(self, category_id: int) -> None:
        self.categories.delete(category_id)

    # Items

    def list_items(self) -> list[Item]:
        return self.items.all()

    def add_item(
        self, name: str, category_id: int, price: float, purchase_date: date
    ) -> int:
        if not name.strip():
            raise ValidationError(_EMPTY_ITEM_NAME)
        return self.items.create(
            Item(
                name=name,
                category_id=category_id,
                price=price,
                purchase_date=purchase_date,
            )
        )

    def get_item_detail(self, item_id: int) -> Item:
        return self.items.get(item_id)

    def edit_item(
        self,
        item_id: int,
        name: str,
        category_id: int,
        price: float,
        purchase_date: date,
    ) -> None:
        if not name.strip():
            raise ValidationError(_EMPTY_ITEM_NAME)
        self.items.update(
            item_id,
            Item(
                name=name,
                category_id=category_id,
                price=price,
                purchase_date=purchase_date,
            ),
        )

    def remove_item(self, item_id: int) -> None:
        self.items.delete(item_id)

    def search_items_by_name(self, keyword: str) -> list[Item]:
        """Items whose name contains the keyword, ignoring case."""
        needle = keyword.lower()
        return [item for item in self.items.all() if needle in item.name.lower()]

    # Reports

    def items_over_100_days(self, now: date | datetime | None = None) -> list[Item]:
        """Items in use for more than a hundred days, due for replacement."""
        return [
            item
            for item in self.items.all()
            if days_since(item.purchase_date, now) > REPLACEMENT_AGE_DAYS
        ]

    def total_investment_value(self, now: date | datetime | None = None) -> float:
        """Sum of every item's value after depreciation."""
        return sum(
            (
                calculate_depreciation(item.price, item.purchase_date, now)
                for item in self.items.all()
            ),
            0.0,
        )

    def item_investment_value(
        self, item_id: int, now: date | datetime | None = None
    ) -> tuple[float, float]:
        """Original price and depreciated value of one item."""
        item = self.items.get(item_id)
        return item.price, calculate_depreciation(item.price, item.purchase_date, now)