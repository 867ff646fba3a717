"""
Audit Models for Habit Calendar

Every state change and every storage failure is recorded as an event.
This provides:
1. A trail of what the user did (habits added, days toggled)
2. Diagnostics when the stored document could not be read or written

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Persistence
    STATE_LOADED = "state_loaded"
    STATE_LOAD_FAILED = "state_load_failed"
    STATE_SAVED = "state_saved"
    STATE_SAVE_FAILED = "state_save_failed"

    # User actions
    HABIT_ADDED = "habit_added"
    HABIT_REJECTED = "habit_rejected"
    COMPLETION_TOGGLED = "completion_toggled"
    MONTH_NAVIGATED = "month_navigated"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'habit', 'document', 'view')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="ID of the entity (habit id, storage key)"
    )

    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.habit_added(habit_id, name, color_index)
        event = AuditEventBuilder.state_load_failed(storage_key, reason)
    """

    @staticmethod
    def state_loaded(storage_key: str, habit_count: int, found: bool) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STATE_LOADED,
            entity_type="document",
            entity_id=storage_key,
            description=(
                f"Loaded {habit_count} habit(s)" if found
                else "No stored document, starting empty"
            ),
            details={"habit_count": habit_count, "found": found},
        )

    @staticmethod
    def state_load_failed(storage_key: str, reason: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STATE_LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="document",
            entity_id=storage_key,
            description="Stored document unreadable, starting empty",
            error_message=reason,
        )

    @staticmethod
    def state_saved(storage_key: str, size_bytes: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STATE_SAVED,
            severity=AuditSeverity.DEBUG,
            entity_type="document",
            entity_id=storage_key,
            description="Document saved",
            details={"size_bytes": size_bytes},
        )

    @staticmethod
    def state_save_failed(storage_key: str, reason: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STATE_SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="document",
            entity_id=storage_key,
            description="Document could not be saved",
            error_message=reason,
        )

    @staticmethod
    def habit_added(
        habit_id: str,
        name: str,
        color_index: Optional[int],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.HABIT_ADDED,
            entity_type="habit",
            entity_id=habit_id,
            description=f"Habit added: {name}",
            details={"name": name, "color_index": color_index},
            is_user_action=True,
        )

    @staticmethod
    def habit_rejected(raw_name: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.HABIT_REJECTED,
            severity=AuditSeverity.DEBUG,
            entity_type="habit",
            description="Empty habit name ignored",
            details={"raw_length": len(raw_name)},
            is_user_action=True,
        )

    @staticmethod
    def completion_toggled(
        habit_id: str,
        date_key: str,
        completed: bool,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COMPLETION_TOGGLED,
            entity_type="habit",
            entity_id=habit_id,
            description=f"{date_key} marked {'done' if completed else 'not done'}",
            details={"date_key": date_key, "completed": completed},
            is_user_action=True,
        )

    @staticmethod
    def month_navigated(year: int, month_index: int, delta: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MONTH_NAVIGATED,
            severity=AuditSeverity.DEBUG,
            entity_type="view",
            description=f"Viewing {year}-{month_index + 1:02d}",
            details={"year": year, "month_index": month_index, "delta": delta},
            is_user_action=True,
        )
