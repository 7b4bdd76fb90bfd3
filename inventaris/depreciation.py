"""Age and depreciated value of purchased items."""

from __future__ import annotations

from datetime import date, datetime, time

DEPRECIATION_RATE = 0.20  # 20% per year

_SECONDS_PER_DAY = 24 * 60 * 60
_DAYS_PER_YEAR = 365


def _as_datetime(moment: date | datetime) -> datetime:
    if isinstance(moment, datetime):
        return moment
    return datetime.combine(moment, time.min)


def _elapsed_days(purchase_date: date | datetime, now: date | datetime | None) -> float:
    start = _as_datetime(purchase_date)
    end = datetime.now(start.tzinfo) if now is None else _as_datetime(now)
    return (end - start).total_seconds() / _SECONDS_PER_DAY


def days_since(purchase_date: date | datetime, now: date | datetime | None = None) -> int:
    """Whole days elapsed since the purchase, truncated toward zero."""
    return int(_elapsed_days(purchase_date, now))


def calculate_depreciation(
    price: float,
    purchase_date: date | datetime,
    now: date | datetime | None = None,
) -> float:
    """Value of an item after losing DEPRECIATION_RATE of its worth each year."""
    years = _elapsed_days(purchase_date, now) / _DAYS_PER_YEAR
    return price * (1 - DEPRECIATION_RATE) ** years