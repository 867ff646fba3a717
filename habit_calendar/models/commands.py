"""
Command Models

Every user interaction becomes one of these values and is handed to
HabitTrackerApp.dispatch(). The UI never touches the state directly.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from habit_calendar.grid.dates import is_date_key
from habit_calendar.models.habit import Habit
from habit_calendar.models.view import ViewCursor


class ToggleCompletion(BaseModel):
    """Flip the completion marker of one habit on one day."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["toggle_completion"] = "toggle_completion"
    habit_id: str = Field(..., min_length=1)
    date_key: str

    @field_validator('date_key')
    @classmethod
    def validate_date_key(cls, v: str) -> str:
        if not is_date_key(v):
            raise ValueError(f"Date key must be YYYY-MM-DD, got {v!r}")
        return v


class AddHabit(BaseModel):
    """
    Add a habit from the new-habit form.

    The name is passed through untrimmed; an empty or whitespace-only
    name makes the command a no-op.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["add_habit"] = "add_habit"
    name: str = ""


class NavigateMonth(BaseModel):
    """Move the view cursor one month back (-1) or forward (+1)."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["navigate_month"] = "navigate_month"
    delta: Literal[-1, 1]

    @classmethod
    def previous(cls) -> "NavigateMonth":
        return cls(delta=-1)

    @classmethod
    def next(cls) -> "NavigateMonth":
        return cls(delta=1)


Command = Annotated[
    Union[ToggleCompletion, AddHabit, NavigateMonth],
    Field(discriminator="kind"),
]

_command_adapter = TypeAdapter(Command)


def parse_command(data: dict) -> Union[ToggleCompletion, AddHabit, NavigateMonth]:
    """Build a command from a plain dict carrying a `kind` field."""
    return _command_adapter.validate_python(data)


class CommandOutcome(BaseModel):
    """
    What a dispatched command did.

    `completed` is set for toggles, `habit` for successful adds.
    `needs_full_render` tells the UI to redraw the habit list and grid
    rather than a single cell.
    """
    command_kind: str
    changed: bool
    cursor: ViewCursor
    completed: Optional[bool] = None
    habit: Optional[Habit] = None
    needs_full_render: bool = False
