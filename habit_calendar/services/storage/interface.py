"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the habit document in a JSON file today and somewhere else later
2. Use in-memory storage for testing
3. Keep the state store decoupled from where bytes end up

The habit document lives in a single key-value slot: one key, one
serialized JSON document, always rewritten whole.
"""

from abc import ABC, abstractmethod
from typing import Optional

from habit_calendar.models.audit import AuditEvent


class StateSlotInterface(ABC):
    """
    Abstract interface for the slot holding the habit document.

    Any slot implementation (file, memory, browser storage bridge)
    must implement these methods.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """The application-specific key the document is stored under."""
        pass

    @abstractmethod
    def read(self) -> Optional[str]:
        """
        Read the stored document.

        Returns:
            The serialized document, or None if nothing was ever stored

        Raises:
            SlotReadError: If the slot exists but cannot be read
        """
        pass

    @abstractmethod
    def write(self, document: str) -> None:
        """
        Replace the stored document.

        The write is all-or-nothing: readers see either the old or the
        new document, never a mix.

        Raises:
            SlotWriteError: If the document could not be written
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if stored successfully
        """
        pass

    @abstractmethod
    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Returns:
            List of recent events (newest first)
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class SlotReadError(StorageError):
    """The slot exists but its contents could not be read."""
    pass


class SlotWriteError(StorageError):
    """The document could not be written to the slot."""
    pass
