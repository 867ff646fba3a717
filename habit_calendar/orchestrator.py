"""
Main Orchestrator for Habit Calendar

This module ties together all the components and owns the two pieces
of application state:
1. The habit document (AppState), loaded once and persisted by the store
2. The view cursor (which month is on screen), never persisted

DESIGN DECISION: The UI never mutates state directly. Every interaction
becomes a command value handed to HabitTrackerApp.dispatch(), which is
the single place where state changes happen.
"""

from datetime import date
from typing import Callable, Optional

from habit_calendar.audit import AuditLogger
from habit_calendar.config import DisplaySettings, Settings, get_settings
from habit_calendar.grid.projector import project_month
from habit_calendar.models.commands import (
    AddHabit,
    Command,
    CommandOutcome,
    NavigateMonth,
    ToggleCompletion,
)
from habit_calendar.models.habit import AppState, Habit
from habit_calendar.models.view import MonthGrid, ViewCursor
from habit_calendar.services.storage import (
    InMemoryAuditStorage,
    InMemorySlot,
    JsonFileSlot,
    StateSlotInterface,
)
from habit_calendar.state_store import StateStore


class HabitTrackerApp:
    """
    Application context for one user session.

    Flow:
    1. Startup → load the document (or start empty), cursor on this month
    2. Interaction → dispatch(command) → store mutation / cursor move
    3. Render → project() → MonthGrid for the UI to draw
    """

    def __init__(
        self,
        store: StateStore,
        audit_logger: Optional[AuditLogger] = None,
        display: Optional[DisplaySettings] = None,
        cursor: Optional[ViewCursor] = None,
        today_provider: Callable[[], date] = date.today,
    ):
        self._store = store
        self._audit_logger = audit_logger or AuditLogger()
        self._display = display or DisplaySettings()
        self._today_provider = today_provider

        self.state: AppState = store.load()
        self.cursor: ViewCursor = cursor or ViewCursor.for_date(today_provider())

    @property
    def show_habit_list(self) -> bool:
        return self._display.show_habit_list

    @property
    def color_cycle(self) -> bool:
        return self._store.color_cycle

    @property
    def habits(self) -> list[Habit]:
        return self.state.habits

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    def today(self) -> date:
        return self._today_provider()

    def project(self) -> MonthGrid:
        """Grid for the month under the cursor."""
        return project_month(self.state, self.cursor, today=self.today())

    def dispatch(self, command: Command) -> CommandOutcome:
        """
        Apply one command and report what changed.

        Toggle and navigate always succeed. AddHabit with a blank name
        is a no-op.
        """
        if isinstance(command, ToggleCompletion):
            return self._toggle_completion(command)
        elif isinstance(command, AddHabit):
            return self._add_habit(command)
        elif isinstance(command, NavigateMonth):
            return self._navigate_month(command)
        else:
            raise TypeError(f"Unknown command: {command!r}")

    def _toggle_completion(self, command: ToggleCompletion) -> CommandOutcome:
        # Cells only exist for known habits; anything else would leave an orphan
        if self.state.get_habit(command.habit_id) is None:
            return CommandOutcome(
                command_kind=command.kind,
                changed=False,
                cursor=self.cursor,
            )

        completed = self._store.toggle_completion(
            self.state,
            command.habit_id,
            command.date_key,
        )
        return CommandOutcome(
            command_kind=command.kind,
            changed=True,
            cursor=self.cursor,
            completed=completed,
        )

    def _add_habit(self, command: AddHabit) -> CommandOutcome:
        habit = self._store.add_habit(self.state, command.name)
        return CommandOutcome(
            command_kind=command.kind,
            changed=habit is not None,
            cursor=self.cursor,
            habit=habit,
            needs_full_render=habit is not None,
        )

    def _navigate_month(self, command: NavigateMonth) -> CommandOutcome:
        self.cursor = self.cursor.shifted(command.delta)
        self._audit_logger.log_month_navigated(
            self.cursor.year,
            self.cursor.month_index,
            command.delta,
        )
        return CommandOutcome(
            command_kind=command.kind,
            changed=True,
            cursor=self.cursor,
            needs_full_render=True,
        )


def create_slot(settings: Settings) -> StateSlotInterface:
    """Build the slot named by HABITS_STORAGE_BACKEND."""
    storage_settings = settings.storage
    if storage_settings.backend == "memory":
        return InMemorySlot(key=storage_settings.storage_key)
    return JsonFileSlot.from_settings(storage_settings)


def create_app(
    settings: Optional[Settings] = None,
    slot: Optional[StateSlotInterface] = None,
    today_provider: Callable[[], date] = date.today,
) -> HabitTrackerApp:
    """
    Factory function to create the application context.

    Args:
        settings: Settings to build from; defaults to get_settings()
        slot: Storage slot override (tests pass an InMemorySlot)
        today_provider: Source of "today" for the cursor and grid

    Returns:
        A HabitTrackerApp with its state already loaded
    """
    settings = settings or get_settings()
    app_settings = settings.app
    display = settings.display

    audit_storage = InMemoryAuditStorage(max_events=app_settings.audit_history_size)
    audit_logger = AuditLogger(audit_storage)

    store = StateStore(
        slot=slot or create_slot(settings),
        audit_logger=audit_logger,
        color_cycle=display.color_cycle,
    )

    return HabitTrackerApp(
        store=store,
        audit_logger=audit_logger,
        display=display,
        today_provider=today_provider,
    )
