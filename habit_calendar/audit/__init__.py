"""Audit logging package."""

from habit_calendar.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
