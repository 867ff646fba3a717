"""Services package."""

from habit_calendar.services.storage import (
    AuditStorageInterface,
    InMemoryAuditStorage,
    InMemorySlot,
    JsonFileSlot,
    SlotReadError,
    SlotWriteError,
    StateSlotInterface,
    StorageError,
)

__all__ = [
    "AuditStorageInterface",
    "InMemoryAuditStorage",
    "InMemorySlot",
    "JsonFileSlot",
    "SlotReadError",
    "SlotWriteError",
    "StateSlotInterface",
    "StorageError",
]
