"""
View Models for Habit Calendar

The view cursor (which month is on screen) and the grid description
the calendar projector produces for the UI to draw. None of these are
persisted.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from habit_calendar.grid.dates import format_month_label, shift_month


class ViewCursor(BaseModel):
    """
    The year/month currently displayed, independent of today's date.

    Always denotes day 1 of the month. Frozen: navigation returns a
    new cursor.
    """
    model_config = ConfigDict(frozen=True)

    year: int = Field(..., description="Proleptic Gregorian year, unbounded")
    month_index: int = Field(
        ...,
        ge=0,
        le=11,
        description="Zero-based month (0 = January)"
    )

    @classmethod
    def for_date(cls, day: date) -> "ViewCursor":
        return cls(year=day.year, month_index=day.month - 1)

    def shifted(self, delta: int) -> "ViewCursor":
        """Move by delta months, rolling over year boundaries."""
        year, month_index = shift_month(self.year, self.month_index, delta)
        return ViewCursor(year=year, month_index=month_index)

    @property
    def label(self) -> str:
        return format_month_label(self.year, self.month_index)


class HeaderCell(BaseModel):
    """Column header: short weekday name above the day number."""
    day: int
    weekday: str
    is_today: bool = False


class DayCell(BaseModel):
    """One habit/day cell of the grid."""
    day: int
    date_key: str
    completed: bool = False


class HabitRow(BaseModel):
    """A habit label followed by one cell per day of the month."""
    habit_id: str
    name: str
    color_index: int = 0
    cells: list[DayCell] = Field(default_factory=list)

    @property
    def completed_count(self) -> int:
        return sum(1 for cell in self.cells if cell.completed)


class MonthGrid(BaseModel):
    """
    Renderable description of one month.

    When there are no habits, `placeholder` holds the message to show
    and there are no header cells or rows.
    """
    year: int
    month_index: int
    month_label: str
    days_in_month: int
    corner_label: str = "Habits"
    header_cells: list[HeaderCell] = Field(default_factory=list)
    rows: list[HabitRow] = Field(default_factory=list)
    placeholder: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.placeholder is not None
