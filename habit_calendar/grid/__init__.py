"""Calendar grid package: date helpers and the month projector."""

from habit_calendar.grid.dates import (
    date_key,
    date_key_for,
    days_in_month,
    format_month_label,
    is_date_key,
    shift_month,
    weekday_abbreviation,
)

__all__ = [
    "date_key",
    "date_key_for",
    "days_in_month",
    "format_month_label",
    "is_date_key",
    "shift_month",
    "weekday_abbreviation",
]
