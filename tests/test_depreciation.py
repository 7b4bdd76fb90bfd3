from datetime import date, datetime, timedelta

import pytest

from inventaris.depreciation import (
    DEPRECIATION_RATE,
    calculate_depreciation,
    days_since,
)

PURCHASE = date(2023, 3, 15)


def test_no_time_elapsed_keeps_full_price():
    assert calculate_depreciation(15000000, PURCHASE, PURCHASE) == pytest.approx(15000000)


def test_one_year_loses_the_rate():
    now = PURCHASE + timedelta(days=365)
    value = calculate_depreciation(1000.0, PURCHASE, now)
    assert value == pytest.approx(1000.0 * (1 - DEPRECIATION_RATE))


def test_two_years_compound():
    one = calculate_depreciation(500.0, PURCHASE, PURCHASE + timedelta(days=365))
    two = calculate_depreciation(500.0, PURCHASE, PURCHASE + timedelta(days=730))
    assert two == pytest.approx(one * one / 500.0)


def test_value_decreases_over_time():
    values = [
        calculate_depreciation(2000.0, PURCHASE, PURCHASE + timedelta(days=d))
        for d in (10, 100, 400, 1000)
    ]
    assert values == sorted(values, reverse=True)
    assert all(0 < value < 2000.0 for value in values)


def test_value_is_proportional_to_price():
    now = PURCHASE + timedelta(days=200)
    single = calculate_depreciation(100.0, PURCHASE, now)
    triple = calculate_depreciation(300.0, PURCHASE, now)
    assert triple == pytest.approx(single * 3)


def test_days_since_counts_whole_days():
    now = datetime.combine(PURCHASE, datetime.min.time()) + timedelta(days=101, hours=5)
    assert days_since(PURCHASE, now) == 101


def test_days_since_accepts_dates():
    assert days_since(PURCHASE, PURCHASE + timedelta(days=42)) == 42


def test_days_since_truncates_toward_zero_for_future_purchase():
    start = datetime(2024, 1, 10, 12, 0)
    assert days_since(start, start - timedelta(hours=12)) == 0
    assert days_since(start, start - timedelta(days=3, hours=1)) == -3


def test_days_since_defaults_to_now():
    assert days_since(date.today() - timedelta(days=5)) == 5