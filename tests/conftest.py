"""Shared fixtures: in-memory storage, a deterministic store and app."""

import itertools
from datetime import date

import pytest

from habit_calendar.audit import AuditLogger
from habit_calendar.config import DisplaySettings
from habit_calendar.orchestrator import HabitTrackerApp
from habit_calendar.services.storage import InMemoryAuditStorage, InMemorySlot
from habit_calendar.state_store import StateStore


FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture
def slot():
    return InMemorySlot()


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage(max_events=50)


@pytest.fixture
def audit_logger(audit_storage):
    return AuditLogger(audit_storage)


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"habit_{next(counter)}"


@pytest.fixture
def store(slot, audit_logger, id_factory):
    return StateStore(slot=slot, audit_logger=audit_logger, id_factory=id_factory)


@pytest.fixture
def color_store(slot, audit_logger, id_factory):
    return StateStore(
        slot=slot,
        audit_logger=audit_logger,
        color_cycle=True,
        id_factory=id_factory,
    )


@pytest.fixture
def tracker(store, audit_logger):
    return HabitTrackerApp(
        store=store,
        audit_logger=audit_logger,
        display=DisplaySettings(show_habit_list=True, color_cycle=False),
        today_provider=lambda: FIXED_TODAY,
    )
