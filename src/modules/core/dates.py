"""Calendar helpers for business-date rules."""

from __future__ import annotations

import calendar
from datetime import date


def add_months(value: date, months: int) -> date:
    """Return *value* shifted by *months* calendar months.

    The day is clamped to the last day of the target month, so
    ``add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)``.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))
