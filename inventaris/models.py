"""Inventory records and the errors raised while working with them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


class InventoryError(Exception):
    """Base error for every inventory operation that fails."""


class NotFoundError(InventoryError):
    """A category or item with the requested id does not exist."""


class ValidationError(InventoryError):
    """Input was rejected before reaching the database."""


@dataclass
class Category:
    """A group that inventory items belong to."""

    id: int = 0
    name: str = ""
    description: str = ""


@dataclass
class Item:
    """A purchased inventory item."""

    id: int = 0
    name: str = ""
    price: float = 0.0
    purchase_date: date = field(default_factory=date.today)
    usage_days: int = 0
    category_id: int = 0
    category: Category | None = None