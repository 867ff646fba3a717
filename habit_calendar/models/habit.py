"""
Core Data Models for Habit Calendar

These models define the persisted document and are designed to:
1. Round-trip the stored JSON shape exactly (camelCase keys on disk)
2. Ignore unknown fields so older and newer documents both load
3. Be mutated in place by the state store

DESIGN DECISION: A completion is a `True` marker under
completions[habit_id][date_key]. Absence means "not completed";
an explicit False is never written.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# Number of row colors a habit can cycle through
PALETTE_SIZE = 5

# Accepted spellings of the color field
COLOR_KEYS = ("colorIndex", "color_index")


class Habit(BaseModel):
    """
    A user-defined recurring activity tracked per day.

    Habits are never edited after creation.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(
        ...,
        min_length=1,
        description="Unique opaque identifier, generated at creation"
    )
    name: str = Field(
        ...,
        min_length=1,
        description="User-supplied habit name"
    )
    color_index: Optional[int] = Field(
        default=None,
        ge=0,
        lt=PALETTE_SIZE,
        alias="colorIndex",
        description="Row color, assigned cyclically when color cycling is on"
    )

    @property
    def display_color_index(self) -> int:
        """Color used for rendering; documents without one render as 0."""
        return self.color_index if self.color_index is not None else 0


def _is_palette_index(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < PALETTE_SIZE


class AppState(BaseModel):
    """
    The whole persisted document: habits in display order plus completions.

    Every habit id in `completions` should belong to a habit in `habits`.
    Orphaned entries are tolerated when loading but never produced.
    """
    model_config = ConfigDict(extra="ignore")

    habits: list[Habit] = Field(default_factory=list)
    completions: dict[str, dict[str, bool]] = Field(
        default_factory=dict,
        description="habit id -> date key (YYYY-MM-DD) -> True"
    )

    @field_validator("habits", mode="before")
    @classmethod
    def drop_unusable_habits(cls, value: Any) -> Any:
        """
        Keep every habit entry that can be read.

        A colorIndex outside the palette is dropped (the row renders as
        color 0); an entry without a usable id or name is skipped so the
        rest of the document still loads.
        """
        if not isinstance(value, list):
            return value

        habits = []
        for entry in value:
            if isinstance(entry, dict):
                entry = {
                    k: v for k, v in entry.items()
                    if k not in COLOR_KEYS or _is_palette_index(v)
                }
            try:
                habits.append(Habit.model_validate(entry))
            except ValidationError:
                continue
        return habits

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        for habit in self.habits:
            if habit.id == habit_id:
                return habit
        return None

    def habit_ids(self) -> set[str]:
        return {habit.id for habit in self.habits}

    def is_completed(self, habit_id: str, date_key: str) -> bool:
        """True only when the marker under habit_id/date_key is exactly True."""
        return self.completions.get(habit_id, {}).get(date_key) is True

    def to_json(self) -> str:
        """Persisted JSON: camelCase `colorIndex`, omitted when unset."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
