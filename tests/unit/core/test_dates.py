"""Unit tests for calendar month arithmetic."""

from __future__ import annotations

from datetime import date

import pytest

from modules.core.dates import add_months

pytestmark = pytest.mark.unit


class TestAddMonths:
    def test_same_day_in_target_month(self):
        assert add_months(date(2025, 1, 15), 3) == date(2025, 4, 15)

    def test_rolls_over_year(self):
        assert add_months(date(2025, 11, 10), 3) == date(2026, 2, 10)

    def test_clamps_to_end_of_short_month(self):
        assert add_months(date(2025, 11, 30), 3) == date(2026, 2, 28)

    def test_clamps_to_leap_day(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_zero_months_is_identity(self):
        assert add_months(date(2025, 6, 1), 0) == date(2025, 6, 1)

    def test_negative_months(self):
        assert add_months(date(2025, 3, 31), -1) == date(2025, 2, 28)
