"""Conversions between day-of-year and month/day-of-month dates."""

from __future__ import annotations

import calendar

from .record import PositionRecord
from .request import DateInput

# Days before the first of each month (index 1-12), non-leap / leap
_MONTH_START: tuple[tuple[int, ...], tuple[int, ...]] = (
    (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334),
    (0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335),
)


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def day_of_year(year: int, month: int, day: int) -> int:
    """Day of year (1-366) for a month/day date."""
    return day + _MONTH_START[calendar.isleap(year)][month]


def month_day(year: int, daynum: int) -> tuple[int, int]:
    """``(month, day)`` for a day of year."""
    starts = _MONTH_START[calendar.isleap(year)]
    month = 12
    while month > 1 and daynum <= starts[month]:
        month -= 1
    return month, daynum - starts[month]


def normalize_date(record: PositionRecord, date_input: DateInput) -> None:
    """Derive whichever date representation was not supplied."""
    if date_input is DateInput.DAY_OF_YEAR:
        record.month, record.day = month_day(record.year, record.daynum)
    else:
        record.daynum = day_of_year(record.year, record.month, record.day)
