"""
Streamlit Frontend for Habit Calendar

DESIGN PRINCIPLES:
1. One glance shows the whole month
2. One click ticks a day
3. Nothing is ever lost: every click is saved immediately
4. No error pop-ups: bad data quietly becomes an empty tracker

The UI only reads MonthGrid projections and sends commands; all state
changes go through HabitTrackerApp.dispatch().
"""

import html

import streamlit as st

from habit_calendar.audit import configure_logging
from habit_calendar.config import get_settings, validate_all_settings
from habit_calendar.models import (
    AddHabit,
    HabitRow,
    MonthGrid,
    NavigateMonth,
    ToggleCompletion,
)
from habit_calendar.orchestrator import HabitTrackerApp, create_app


# Page configuration
st.set_page_config(
    page_title="Habit Calendar",
    page_icon="✅",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Row colors, indexed by Habit.colorIndex
ROW_COLORS = ["#4f46e5", "#059669", "#d97706", "#db2777", "#0891b2"]

st.markdown("""
<style>
    .month-label {
        text-align: center;
        font-size: 1.6em;
        font-weight: bold;
        margin: 0;
    }
    .calendar-header-cell {
        text-align: center;
        font-size: 0.75em;
        line-height: 1.2;
        opacity: 0.8;
    }
    .calendar-header-cell .day-number {
        display: block;
        font-weight: bold;
        font-size: 1.2em;
    }
    .today-header {
        background-color: rgba(79, 70, 229, 0.18);
        border-radius: 6px;
        opacity: 1;
    }
    .calendar-habit-cell {
        font-weight: 600;
        padding: 4px 8px;
        border-radius: 6px;
        white-space: nowrap;
        overflow: hidden;
        text-overflow: ellipsis;
    }
    .habit-swatch {
        display: inline-block;
        width: 10px;
        height: 10px;
        border-radius: 50%;
        margin-right: 6px;
    }
    .no-habits-message {
        padding: 20px;
        background-color: #cce5ff;
        border-radius: 10px;
        border-left: 5px solid #004085;
        margin: 10px 0;
    }
</style>
""", unsafe_allow_html=True)


def get_tracker() -> HabitTrackerApp:
    """Get or create this session's application context."""
    if "tracker" not in st.session_state:
        st.session_state.tracker = create_app()
    return st.session_state.tracker


def main():
    """Main application entry point."""
    configure_logging(get_settings().app.log_level)
    tracker = get_tracker()

    # Sidebar navigation
    st.sidebar.title("✅ Habit Calendar")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["📅 Calendar", "⚙️ Settings"],
        index=0,
    )

    st.sidebar.markdown("---")

    if tracker.show_habit_list:
        render_habit_list(tracker)

    if get_settings().app.debug_mode:
        render_recent_activity(tracker)

    # Route to appropriate page
    if page == "📅 Calendar":
        render_calendar_page(tracker)
    elif page == "⚙️ Settings":
        render_settings_page()


def render_habit_list(tracker: HabitTrackerApp):
    """Render the habit list panel in the sidebar."""
    st.sidebar.markdown("### Your Habits")

    if not tracker.habits:
        st.sidebar.caption("No habits yet.")
        return

    for habit in tracker.habits:
        color = ROW_COLORS[habit.display_color_index]
        swatch = (
            f'<span class="habit-swatch" style="background-color:{color}"></span>'
            if tracker.color_cycle else ""
        )
        st.sidebar.markdown(f"{swatch}{html.escape(habit.name)}", unsafe_allow_html=True)

    st.sidebar.markdown("---")


def render_recent_activity(tracker: HabitTrackerApp):
    """Render the last few audit events (debug mode only)."""
    with st.sidebar.expander("🔍 Recent activity"):
        events = tracker.audit_logger.recent_events(limit=15)
        if not events:
            st.caption("Nothing yet.")
        for event in events:
            st.caption(f"{event.timestamp:%H:%M:%S} · {event.event_type.value} · {event.description}")


def render_calendar_page(tracker: HabitTrackerApp):
    """Render the month navigation, new-habit form and grid."""
    render_new_habit_form(tracker)

    grid = tracker.project()

    # Month navigation
    col1, col2, col3 = st.columns([1, 4, 1])

    with col1:
        st.button(
            "◀ Previous",
            key="prev_month",
            on_click=tracker.dispatch,
            args=(NavigateMonth.previous(),),
            use_container_width=True,
        )

    with col2:
        st.markdown(
            f'<p class="month-label">{grid.month_label}</p>',
            unsafe_allow_html=True,
        )

    with col3:
        st.button(
            "Next ▶",
            key="next_month",
            on_click=tracker.dispatch,
            args=(NavigateMonth.next(),),
            use_container_width=True,
        )

    st.markdown("---")

    if grid.is_empty:
        st.markdown(
            f'<div class="no-habits-message">{grid.placeholder}</div>',
            unsafe_allow_html=True,
        )
        return

    render_grid(tracker, grid)


def render_new_habit_form(tracker: HabitTrackerApp):
    """
    Render the new-habit form.

    Blank names are ignored without a message. A new habit changes both
    the sidebar habit list and the grid, so the page is drawn again.
    """
    with st.form("new_habit_form", clear_on_submit=True):
        col1, col2 = st.columns([4, 1])

        with col1:
            name = st.text_input(
                "New habit",
                placeholder="e.g. Read 10 pages",
                label_visibility="collapsed",
            )

        with col2:
            submitted = st.form_submit_button("➕ Add habit", use_container_width=True)

    if submitted:
        outcome = tracker.dispatch(AddHabit(name=name))
        if outcome.needs_full_render:
            st.rerun()


def render_grid(tracker: HabitTrackerApp, grid: MonthGrid):
    """Render the header row and one row of check cells per habit."""
    widths = [4] + [1] * grid.days_in_month

    # Header row
    header = st.columns(widths)
    header[0].markdown(f"**{grid.corner_label}**")
    for column, cell in zip(header[1:], grid.header_cells):
        css_class = "calendar-header-cell today-header" if cell.is_today else "calendar-header-cell"
        column.markdown(
            f'<div class="{css_class}">{cell.weekday}'
            f'<span class="day-number">{cell.day}</span></div>',
            unsafe_allow_html=True,
        )

    # Habit rows
    for row in grid.rows:
        render_habit_row(tracker, row, widths)


def render_habit_row(tracker: HabitTrackerApp, row: HabitRow, widths: list[int]):
    columns = st.columns(widths)

    name = html.escape(row.name)
    if tracker.color_cycle:
        color = ROW_COLORS[row.color_index]
        label = (
            f'<div class="calendar-habit-cell" style="border-left: 4px solid {color}">'
            f'{name}</div>'
        )
    else:
        label = f'<div class="calendar-habit-cell">{name}</div>'
    columns[0].markdown(label, unsafe_allow_html=True)

    for column, cell in zip(columns[1:], row.cells):
        column.checkbox(
            f"{row.name} {cell.date_key}",
            value=cell.completed,
            key=f"cell:{row.habit_id}:{cell.date_key}",
            on_change=tracker.dispatch,
            args=(ToggleCompletion(habit_id=row.habit_id, date_key=cell.date_key),),
            label_visibility="collapsed",
        )


def render_settings_page():
    """Render the settings page."""
    st.title("⚙️ Settings")

    st.markdown("### Configuration Status")

    status = validate_all_settings()

    groups = [
        ("Storage", "storage"),
        ("Display", "display"),
        ("Application", "app"),
    ]

    for name, key in groups:
        if status.get(key, False):
            st.success(f"✅ {name} - OK")
        else:
            error = status.get(f"{key}_error", "Not configured")
            st.error(f"❌ {name} - {error}")

    if status.get("storage"):
        storage = get_settings().storage
        st.markdown("### Storage")
        if storage.backend == "file":
            st.markdown(f"Habits are saved to `{storage.document_path}`.")
        else:
            st.markdown("Habits are kept in memory and are lost when the server stops.")

    st.markdown("---")
    st.markdown("### Configuration")
    st.markdown(
        "To configure the application, create a `.env` file. "
        "See `.env.example` for the available variables."
    )


if __name__ == "__main__":
    main()
