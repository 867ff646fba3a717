"""
Storage Services Package

Provides abstract interfaces and concrete implementations for data storage.
The habit document lives in a JSON file by default, but the slot is swappable.
"""

from habit_calendar.services.storage.interface import (
    AuditStorageInterface,
    SlotReadError,
    SlotWriteError,
    StateSlotInterface,
    StorageError,
)
from habit_calendar.services.storage.json_file import JsonFileSlot
from habit_calendar.services.storage.memory import (
    InMemoryAuditStorage,
    InMemorySlot,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "StateSlotInterface",
    # Exceptions
    "SlotReadError",
    "SlotWriteError",
    "StorageError",
    # Implementations
    "InMemoryAuditStorage",
    "InMemorySlot",
    "JsonFileSlot",
]
