"""
Tests for Habit Calendar models

Test strategy:
1. Unit tests for the persisted document (Habit, AppState)
2. View cursor navigation and command parsing
3. Audit event construction
"""

import json
from datetime import date

import pytest

from habit_calendar.models import (
    AddHabit,
    AppState,
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
    Habit,
    NavigateMonth,
    ToggleCompletion,
    ViewCursor,
    parse_command,
)


class TestHabitModels:
    """Tests for the persisted document models."""

    def test_habit_creation(self):
        """Test Habit model creation."""
        habit = Habit(id="habit_1", name="Read")
        assert habit.id == "habit_1"
        assert habit.name == "Read"
        assert habit.color_index is None

    def test_habit_strips_whitespace(self):
        """Test that whitespace is stripped from the name."""
        habit = Habit(id="habit_1", name="  Read  ")
        assert habit.name == "Read"

    def test_habit_rejects_blank_name(self):
        """Test that an empty name is rejected."""
        with pytest.raises(ValueError):
            Habit(id="habit_1", name="   ")

    def test_habit_color_index_bounds(self):
        """Test colorIndex must be between 0 and 4."""
        with pytest.raises(ValueError):
            Habit(id="habit_1", name="Read", color_index=5)

    def test_habit_accepts_camel_case_alias(self):
        """Test the stored colorIndex key populates color_index."""
        habit = Habit.model_validate({"id": "h", "name": "Run", "colorIndex": 3})
        assert habit.color_index == 3

    def test_missing_color_renders_as_zero(self):
        """Test display color defaults to 0 when absent."""
        assert Habit(id="h", name="Run").display_color_index == 0
        assert Habit(id="h", name="Run", color_index=2).display_color_index == 2

    def test_app_state_defaults_empty(self):
        """Test a fresh AppState has no habits and no completions."""
        state = AppState()
        assert state.habits == []
        assert state.completions == {}

    def test_app_state_document_shape(self):
        """Test serialization uses camelCase and omits unset colors."""
        state = AppState(
            habits=[
                Habit(id="a", name="Read"),
                Habit(id="b", name="Run", color_index=1),
            ],
            completions={"a": {"2024-01-05": True}, "b": {}},
        )
        document = json.loads(state.to_json())
        assert document == {
            "habits": [
                {"id": "a", "name": "Read"},
                {"id": "b", "name": "Run", "colorIndex": 1},
            ],
            "completions": {"a": {"2024-01-05": True}, "b": {}},
        }

    def test_app_state_ignores_unknown_fields(self):
        """Test unknown fields in the document are dropped."""
        state = AppState.model_validate({
            "version": 7,
            "habits": [{"id": "a", "name": "Read", "emoji": "📚"}],
            "completions": {},
        })
        assert state.habits[0].name == "Read"
        document = json.loads(state.to_json())
        assert "version" not in document
        assert "emoji" not in document["habits"][0]

    def test_is_completed_requires_true_marker(self):
        """Test only an exact True marker counts as completed."""
        state = AppState(
            habits=[Habit(id="a", name="Read")],
            completions={"a": {"2024-01-05": True, "2024-01-06": False}},
        )
        assert state.is_completed("a", "2024-01-05") is True
        assert state.is_completed("a", "2024-01-06") is False
        assert state.is_completed("a", "2024-01-07") is False
        assert state.is_completed("missing", "2024-01-05") is False

    def test_get_habit(self):
        """Test looking a habit up by id."""
        state = AppState(habits=[Habit(id="a", name="Read")])
        assert state.get_habit("a").name == "Read"
        assert state.get_habit("b") is None

    def test_bad_color_index_is_dropped(self):
        """Test a colorIndex outside the palette loads as no color."""
        state = AppState.model_validate({
            "habits": [
                {"id": "a", "name": "Read", "colorIndex": 7},
                {"id": "b", "name": "Run", "colorIndex": "blue"},
                {"id": "c", "name": "Swim", "colorIndex": 4},
            ],
        })
        assert [h.color_index for h in state.habits] == [None, None, 4]
        assert state.habits[0].display_color_index == 0

    def test_unusable_habit_entries_are_skipped(self):
        """Test one broken habit does not discard the others."""
        state = AppState.model_validate({
            "habits": [
                {"id": "a", "name": "Read"},
                {"id": "b", "name": "   "},
                {"name": "No id"},
                "not a habit",
                {"id": "c", "name": "Run"},
            ],
            "completions": {"a": {"2024-01-05": True}, "b": {"2024-01-05": True}},
        })
        assert [h.id for h in state.habits] == ["a", "c"]
        assert state.is_completed("a", "2024-01-05")


class TestViewCursor:
    """Tests for month navigation."""

    def test_for_date(self):
        """Test the cursor is built from a calendar date."""
        cursor = ViewCursor.for_date(date(2024, 3, 15))
        assert (cursor.year, cursor.month_index) == (2024, 2)

    def test_next_from_december_rolls_year(self):
        """Test next from December lands on January of the next year."""
        cursor = ViewCursor(year=2023, month_index=11).shifted(1)
        assert (cursor.year, cursor.month_index) == (2024, 0)

    def test_previous_from_january_rolls_year(self):
        """Test previous from January lands on December of the previous year."""
        cursor = ViewCursor(year=2024, month_index=0).shifted(-1)
        assert (cursor.year, cursor.month_index) == (2023, 11)

    def test_shift_within_year(self):
        """Test a move inside the same year."""
        cursor = ViewCursor(year=2024, month_index=4).shifted(1)
        assert (cursor.year, cursor.month_index) == (2024, 5)

    def test_cursor_is_immutable(self):
        """Test navigation returns a new cursor."""
        cursor = ViewCursor(year=2024, month_index=4)
        with pytest.raises(ValueError):
            cursor.year = 2025

    def test_navigation_has_no_year_bound(self):
        """Test the cursor keeps rolling past years 1 and 9999."""
        before_one = ViewCursor(year=1, month_index=0).shifted(-1)
        after_last = ViewCursor(year=9999, month_index=11).shifted(1)
        assert (before_one.year, before_one.month_index) == (0, 11)
        assert (after_last.year, after_last.month_index) == (10000, 0)
        assert after_last.label == "January 10000"

    def test_label(self):
        """Test the long month label."""
        assert ViewCursor(year=2024, month_index=2).label == "March 2024"


class TestCommands:
    """Tests for interaction command models."""

    def test_toggle_completion_validates_date_key(self):
        """Test a malformed date key is rejected."""
        with pytest.raises(ValueError):
            ToggleCompletion(habit_id="a", date_key="2024-1-5")

    def test_navigate_month_only_single_steps(self):
        """Test navigation moves one month at a time."""
        assert NavigateMonth.previous().delta == -1
        assert NavigateMonth.next().delta == 1
        with pytest.raises(ValueError):
            NavigateMonth(delta=2)

    def test_parse_command_by_kind(self):
        """Test commands are parsed from dicts by their kind."""
        toggle = parse_command({
            "kind": "toggle_completion",
            "habit_id": "a",
            "date_key": "2024-01-05",
        })
        add = parse_command({"kind": "add_habit", "name": "Read"})
        navigate = parse_command({"kind": "navigate_month", "delta": -1})

        assert isinstance(toggle, ToggleCompletion)
        assert isinstance(add, AddHabit)
        assert isinstance(navigate, NavigateMonth)

    def test_parse_command_unknown_kind(self):
        """Test an unknown kind is rejected."""
        with pytest.raises(ValueError):
            parse_command({"kind": "delete_habit", "habit_id": "a"})


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.HABIT_ADDED,
            description="Habit added: Read",
        )
        assert event.event_type == AuditEventType.HABIT_ADDED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.completion_toggled("a", "2024-01-05", True)
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "completion_toggled"
        assert log_dict["details"]["date_key"] == "2024-01-05"
        assert log_dict["is_user_action"] is True

    def test_audit_event_builder_state_load_failed(self):
        """Test AuditEventBuilder.state_load_failed."""
        event = AuditEventBuilder.state_load_failed("dailyHabitsAppData_v1", "bad json")
        assert event.event_type == AuditEventType.STATE_LOAD_FAILED
        assert event.severity == AuditSeverity.ERROR
        assert event.entity_id == "dailyHabitsAppData_v1"
        assert event.error_message == "bad json"

    def test_audit_event_builder_habit_added(self):
        """Test AuditEventBuilder.habit_added."""
        event = AuditEventBuilder.habit_added("habit_1", "Read", 2)
        assert event.entity_type == "habit"
        assert event.entity_id == "habit_1"
        assert event.details == {"name": "Read", "color_index": 2}

    def test_long_habit_name_fits_in_event(self):
        """Test any habit name can be described in an audit event."""
        name = "x" * 600
        event = AuditEventBuilder.habit_added("habit_1", name, None)
        assert event.description.endswith(name)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
