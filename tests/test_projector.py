"""Tests for the calendar projector."""

from datetime import date

from habit_calendar.grid.projector import NO_HABITS_MESSAGE, project_month
from habit_calendar.models import AppState, Habit, ViewCursor


def make_state():
    return AppState(
        habits=[
            Habit(id="read", name="Read", color_index=3),
            Habit(id="run", name="Run"),
        ],
        completions={
            "read": {"2024-02-01": True, "2024-02-29": True, "2024-03-01": True},
            "run": {"2024-02-10": True},
        },
    )


class TestEmptyState:
    """Tests for the no-habits placeholder."""

    def test_placeholder_without_grid(self):
        """Test no habits gives the message and no cells."""
        grid = project_month(AppState(), ViewCursor(year=2024, month_index=1), today=date(2024, 2, 10))
        assert grid.is_empty
        assert grid.placeholder == NO_HABITS_MESSAGE
        assert grid.header_cells == []
        assert grid.rows == []
        assert grid.month_label == "February 2024"


class TestMonthGrid:
    """Tests for a populated month."""

    def test_header_cells_cover_the_month(self):
        """Test one header per day with weekday names."""
        grid = project_month(make_state(), ViewCursor(year=2024, month_index=1), today=date(2024, 5, 1))
        assert grid.days_in_month == 29
        assert [c.day for c in grid.header_cells] == list(range(1, 30))
        assert grid.header_cells[0].weekday == "Thu"
        assert grid.corner_label == "Habits"
        assert not any(c.is_today for c in grid.header_cells)

    def test_today_is_flagged_only_in_its_month(self):
        """Test the real current date is marked when displayed."""
        state = make_state()
        today = date(2024, 2, 10)

        grid = project_month(state, ViewCursor(year=2024, month_index=1), today=today)
        assert [c.day for c in grid.header_cells if c.is_today] == [10]

        other_year = project_month(state, ViewCursor(year=2023, month_index=1), today=today)
        assert not any(c.is_today for c in other_year.header_cells)

    def test_rows_follow_habit_order(self):
        """Test one row per habit in insertion order."""
        grid = project_month(make_state(), ViewCursor(year=2024, month_index=1), today=date(2024, 2, 10))
        assert [row.name for row in grid.rows] == ["Read", "Run"]
        assert all(len(row.cells) == 29 for row in grid.rows)

    def test_cells_reflect_completions(self):
        """Test completed cells match keys in the displayed month only."""
        grid = project_month(make_state(), ViewCursor(year=2024, month_index=1), today=date(2024, 2, 10))
        read, run = grid.rows

        assert [c.day for c in read.cells if c.completed] == [1, 29]
        assert [c.day for c in run.cells if c.completed] == [10]
        assert read.cells[0].date_key == "2024-02-01"
        assert read.completed_count == 2

    def test_missing_color_renders_as_zero(self):
        """Test rows carry the habit color, defaulting to 0."""
        grid = project_month(make_state(), ViewCursor(year=2024, month_index=1), today=date(2024, 2, 10))
        assert [row.color_index for row in grid.rows] == [3, 0]

    def test_defaults_today_to_current_date(self):
        """Test today defaults to the real date."""
        today = date.today()
        grid = project_month(make_state(), ViewCursor.for_date(today))
        assert [c.day for c in grid.header_cells if c.is_today] == [today.day]

    def test_month_before_year_one(self):
        """Test a month outside datetime's range still projects."""
        state = AppState(
            habits=[Habit(id="read", name="Read")],
            completions={"read": {"0000-02-29": True}},
        )
        grid = project_month(state, ViewCursor(year=1, month_index=0).shifted(-11), today=date(2024, 2, 10))
        assert grid.month_label == "February 0"
        assert grid.days_in_month == 29
        assert grid.rows[0].cells[-1].date_key == "0000-02-29"
        assert grid.rows[0].completed_count == 1
