"""
Calendar date helpers.

Months are passed around as zero-based indexes (0 = January) together
with the year, the same way the view cursor stores them. Date keys are
the canonical "YYYY-MM-DD" strings used in the completion map.
"""

import calendar
import re
from datetime import date


WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_DATE_KEY_PATTERN = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$")

# The Gregorian calendar repeats every 400 years (146097 days, a whole
# number of weeks), so any year maps onto one that `datetime` supports.
_CYCLE_YEARS = 400
_CYCLE_BASE = 2000


def _check_month_index(month_index: int) -> None:
    if not 0 <= month_index <= 11:
        raise ValueError(f"month_index must be between 0 and 11, got {month_index}")


def _representable_year(year: int) -> int:
    """A year in datetime's range with the same leap rule and weekdays."""
    return _CYCLE_BASE + year % _CYCLE_YEARS


def days_in_month(year: int, month_index: int) -> int:
    """Number of days in the month, i.e. the last valid day number."""
    _check_month_index(month_index)
    return calendar.monthrange(_representable_year(year), month_index + 1)[1]


def _format_year(year: int) -> str:
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def date_key(year: int, month_index: int, day: int) -> str:
    """
    Build the completion key for a day.

    >>> date_key(2024, 0, 5)
    '2024-01-05'
    """
    _check_month_index(month_index)
    return f"{_format_year(year)}-{month_index + 1:02d}-{day:02d}"


def date_key_for(day: date) -> str:
    return date_key(day.year, day.month - 1, day.day)


def is_date_key(value: str) -> bool:
    """Whether value is a zero-padded YYYY-MM-DD string naming a real day."""
    if not isinstance(value, str):
        return False
    match = _DATE_KEY_PATTERN.match(value)
    if not match:
        return False
    year, month, day = (int(part) for part in match.groups())
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month - 1)


def shift_month(year: int, month_index: int, delta: int) -> tuple[int, int]:
    """
    Move a (year, month_index) pair by delta months.

    Rolls over year boundaries in both directions and has no bound.
    """
    _check_month_index(month_index)
    return divmod(year * 12 + month_index + delta, 12)


def weekday_abbreviation(year: int, month_index: int, day: int) -> str:
    """Short English weekday name, e.g. "Mon"."""
    weekday = date(_representable_year(year), month_index + 1, day).weekday()
    return WEEKDAY_ABBREVIATIONS[weekday]


def format_month_label(year: int, month_index: int) -> str:
    """Long month name and year, e.g. "March 2024"."""
    _check_month_index(month_index)
    return f"{MONTH_NAMES[month_index]} {year}"
