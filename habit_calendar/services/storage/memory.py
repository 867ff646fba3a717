"""
In-Memory Storage Implementations

Used when no disk storage is wanted (HABITS_STORAGE_BACKEND=memory),
for the audit trail shown in the sidebar, and throughout the tests.
"""

from collections import deque
from typing import Optional

from habit_calendar.config import DEFAULT_STORAGE_KEY
from habit_calendar.models.audit import AuditEvent
from habit_calendar.services.storage.interface import (
    AuditStorageInterface,
    StateSlotInterface,
)


class InMemorySlot(StateSlotInterface):
    """A slot that keeps the serialized document in process memory."""

    def __init__(self, key: str = DEFAULT_STORAGE_KEY, document: Optional[str] = None):
        self._key = key
        self._document = document
        self.write_count = 0

    @property
    def key(self) -> str:
        return self._key

    def read(self) -> Optional[str]:
        return self._document

    def write(self, document: str) -> None:
        self._document = document
        self.write_count += 1


class InMemoryAuditStorage(AuditStorageInterface):
    """Keeps the most recent `max_events` audit events."""

    def __init__(self, max_events: int = 200):
        self._events: deque[AuditEvent] = deque(maxlen=max_events)

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]

    def __len__(self) -> int:
        return len(self._events)
