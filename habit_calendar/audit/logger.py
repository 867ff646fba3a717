"""
Audit Logger

DESIGN DECISION: Every state change is logged.
This provides:
1. Debugging capability when the stored document goes missing
2. A recent-activity view for the user

The audit logger:
- Always logs locally through structlog
- Gracefully handles failures (doesn't crash the app if logging fails)
"""

import logging
from typing import Any, Callable, Optional

import structlog
from pydantic import ValidationError

from habit_calendar.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from habit_calendar.models.habit import Habit
from habit_calendar.services.storage.interface import AuditStorageInterface


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output through the stdlib root logger at `level`."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An audit store, when one is configured (for the activity view)
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("habit_calendar.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage is not None:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def recent_events(self, limit: int = 20) -> list[AuditEvent]:
        """Most recent stored events, newest first. Empty without storage."""
        if self._storage is None:
            return []
        return self._storage.get_recent_events(limit=limit)

    def _emit(self, build: Callable[..., AuditEvent], *args: Any) -> bool:
        """Build an event and log it. A bad event is reported, never raised."""
        try:
            event = build(*args)
        except ValidationError as e:
            self._logger.error(
                "audit_event_invalid",
                builder=build.__name__,
                error=str(e),
            )
            return False
        return self.log(event)

    def log_state_loaded(self, storage_key: str, habit_count: int, found: bool) -> None:
        self._emit(AuditEventBuilder.state_loaded, storage_key, habit_count, found)

    def log_state_load_failed(self, storage_key: str, reason: str) -> None:
        self._emit(AuditEventBuilder.state_load_failed, storage_key, reason)

    def log_state_saved(self, storage_key: str, size_bytes: int) -> None:
        self._emit(AuditEventBuilder.state_saved, storage_key, size_bytes)

    def log_state_save_failed(self, storage_key: str, reason: str) -> None:
        self._emit(AuditEventBuilder.state_save_failed, storage_key, reason)

    def log_habit_added(self, habit: Habit) -> None:
        """Log habit creation."""
        self._emit(AuditEventBuilder.habit_added, habit.id, habit.name, habit.color_index)

    def log_habit_rejected(self, raw_name: str) -> None:
        self._emit(AuditEventBuilder.habit_rejected, raw_name)

    def log_completion_toggled(self, habit_id: str, date_key: str, completed: bool) -> None:
        """Log a day cell being checked or unchecked."""
        self._emit(AuditEventBuilder.completion_toggled, habit_id, date_key, completed)

    def log_month_navigated(self, year: int, month_index: int, delta: int) -> None:
        self._emit(AuditEventBuilder.month_navigated, year, month_index, delta)
