"""
Data Models Package

This package contains all Pydantic models used in Habit Calendar:
the persisted document, the view models and the interaction commands.
"""

from habit_calendar.models.habit import (
    PALETTE_SIZE,
    AppState,
    Habit,
)
from habit_calendar.models.view import (
    DayCell,
    HabitRow,
    HeaderCell,
    MonthGrid,
    ViewCursor,
)
from habit_calendar.models.commands import (
    AddHabit,
    Command,
    CommandOutcome,
    NavigateMonth,
    ToggleCompletion,
    parse_command,
)
from habit_calendar.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Document models
    "PALETTE_SIZE",
    "AppState",
    "Habit",
    # View models
    "DayCell",
    "HabitRow",
    "HeaderCell",
    "MonthGrid",
    "ViewCursor",
    # Commands
    "AddHabit",
    "Command",
    "CommandOutcome",
    "NavigateMonth",
    "ToggleCompletion",
    "parse_command",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
