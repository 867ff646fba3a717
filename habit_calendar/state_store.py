"""
State Store

Loads, saves and mutates the habit document. The store does not own
the AppState: callers hand it in, it is changed in place and written
back to the slot after every mutation.

GUARANTEES:
- load() never raises; anything unreadable becomes an empty state
- save() never raises; a failed write is audited and reported as False
- a completion is either a True marker or absent, never False
"""

import time
from typing import Callable, Optional
from uuid import uuid4

from pydantic import ValidationError

from habit_calendar.audit import AuditLogger
from habit_calendar.models.habit import PALETTE_SIZE, AppState, Habit
from habit_calendar.services.storage import StateSlotInterface, StorageError


def generate_habit_id() -> str:
    """Opaque id: creation time in milliseconds plus a random suffix."""
    return f"habit_{int(time.time() * 1000)}_{uuid4().hex[:12]}"


class StateStore:
    """
    Persistence and mutation operations for AppState.

    Color cycling is optional: when enabled each new habit gets
    colorIndex = (number of existing habits) mod 5.
    """

    def __init__(
        self,
        slot: StateSlotInterface,
        audit_logger: Optional[AuditLogger] = None,
        color_cycle: bool = False,
        id_factory: Callable[[], str] = generate_habit_id,
    ):
        self._slot = slot
        self._audit_logger = audit_logger or AuditLogger()  # Local-only logging
        self._color_cycle = color_cycle
        self._id_factory = id_factory

    @property
    def color_cycle(self) -> bool:
        return self._color_cycle

    def load(self) -> AppState:
        """
        Read the persisted document.

        Missing, unreadable, malformed JSON or JSON of the wrong shape
        all fall back to a fresh empty state.
        """
        try:
            raw = self._slot.read()
        except StorageError as e:
            self._audit_logger.log_state_load_failed(self._slot.key, str(e))
            return AppState()

        if raw is None:
            self._audit_logger.log_state_loaded(self._slot.key, 0, found=False)
            return AppState()

        try:
            state = AppState.model_validate_json(raw)
        except ValidationError as e:
            self._audit_logger.log_state_load_failed(
                self._slot.key,
                f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}",
            )
            return AppState()

        self._audit_logger.log_state_loaded(self._slot.key, len(state.habits), found=True)
        return state

    def save(self, state: AppState) -> bool:
        """Serialize the whole state and overwrite the slot."""
        document = state.to_json()
        try:
            self._slot.write(document)
        except StorageError as e:
            self._audit_logger.log_state_save_failed(self._slot.key, str(e))
            return False

        self._audit_logger.log_state_saved(self._slot.key, len(document.encode("utf-8")))
        return True

    def _new_habit_id(self, state: AppState) -> str:
        existing = state.habit_ids()
        habit_id = self._id_factory()
        while habit_id in existing:
            habit_id = self._id_factory()
        return habit_id

    def add_habit(self, state: AppState, name: str) -> Optional[Habit]:
        """
        Append a habit named `name` (trimmed) and persist.

        Returns the new habit, or None when the trimmed name is empty
        (in which case nothing changes).
        """
        trimmed = (name or "").strip()
        if not trimmed:
            self._audit_logger.log_habit_rejected(name or "")
            return None

        color_index = len(state.habits) % PALETTE_SIZE if self._color_cycle else None
        habit = Habit(
            id=self._new_habit_id(state),
            name=trimmed,
            color_index=color_index,
        )

        state.habits.append(habit)
        state.completions.setdefault(habit.id, {})
        self.save(state)

        self._audit_logger.log_habit_added(habit)
        return habit

    def toggle_completion(self, state: AppState, habit_id: str, date_key: str) -> bool:
        """
        Flip the completion of habit_id on date_key and persist.

        Returns the new completion status.
        """
        day_map = state.completions.setdefault(habit_id, {})
        if day_map.get(date_key) is True:
            del day_map[date_key]
            completed = False
        else:
            day_map[date_key] = True
            completed = True

        self.save(state)

        self._audit_logger.log_completion_toggled(habit_id, date_key, completed)
        return completed
