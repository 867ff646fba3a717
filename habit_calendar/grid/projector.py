"""
Calendar Projector

Turns (AppState, ViewCursor) into a MonthGrid. This is a pure function
of its inputs plus "today", which callers pass in explicitly so the
same state always projects to the same grid.
"""

from datetime import date
from typing import Optional

from habit_calendar.grid.dates import (
    date_key,
    days_in_month,
    weekday_abbreviation,
)
from habit_calendar.models.habit import AppState, Habit
from habit_calendar.models.view import (
    DayCell,
    HabitRow,
    HeaderCell,
    MonthGrid,
    ViewCursor,
)


NO_HABITS_MESSAGE = "Add your first habit to get started."


def build_header_cells(cursor: ViewCursor, today: date) -> list[HeaderCell]:
    """One header per day of the month, flagging today if it is on screen."""
    total_days = days_in_month(cursor.year, cursor.month_index)
    showing_today = (today.year, today.month - 1) == (cursor.year, cursor.month_index)

    return [
        HeaderCell(
            day=day,
            weekday=weekday_abbreviation(cursor.year, cursor.month_index, day),
            is_today=showing_today and today.day == day,
        )
        for day in range(1, total_days + 1)
    ]


def build_habit_row(state: AppState, habit: Habit, cursor: ViewCursor) -> HabitRow:
    total_days = days_in_month(cursor.year, cursor.month_index)
    cells = []
    for day in range(1, total_days + 1):
        key = date_key(cursor.year, cursor.month_index, day)
        cells.append(
            DayCell(day=day, date_key=key, completed=state.is_completed(habit.id, key))
        )

    return HabitRow(
        habit_id=habit.id,
        name=habit.name,
        color_index=habit.display_color_index,
        cells=cells,
    )


def project_month(
    state: AppState,
    cursor: ViewCursor,
    today: Optional[date] = None,
) -> MonthGrid:
    """
    Build the renderable grid for the month under the cursor.

    With no habits the grid carries only the placeholder message.
    """
    today = today or date.today()

    grid = MonthGrid(
        year=cursor.year,
        month_index=cursor.month_index,
        month_label=cursor.label,
        days_in_month=days_in_month(cursor.year, cursor.month_index),
    )

    if not state.habits:
        grid.placeholder = NO_HABITS_MESSAGE
        return grid

    grid.header_cells = build_header_cells(cursor, today)
    grid.rows = [build_habit_row(state, habit, cursor) for habit in state.habits]
    return grid
