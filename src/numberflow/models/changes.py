"""Change-classification records produced by the diff engines.

Raw change sets index into the raw strings: ``removed_indices`` holds indices of the
old string, every other set holds indices of the new string. Formatted change sets
only ever index into the new formatted string.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CursorContext(BaseModel):
    """Where an edit happened, in raw-string offsets.

    ``selection_start`` is where the replaced span began in the old value,
    ``cursor_position`` is the caret after the edit and ``old_length`` the length of
    the value the edit was applied to. Values are not constrained here; the diff
    engines check them and fall back to content-based diffing when they disagree.
    """

    cursor_position: int
    selection_start: int
    old_length: int


class ChangeSet(BaseModel):
    """Per-character classification of a raw edit."""

    added_indices: set[int] = Field(default_factory=set)
    removed_indices: set[int] = Field(default_factory=set)
    unchanged_indices: set[int] = Field(default_factory=set)
    changed_indices: set[int] = Field(default_factory=set)


class FormattedChangeSet(BaseModel):
    """Which characters of the new formatted string are new and which persisted."""

    added_indices: set[int] = Field(default_factory=set)
    unchanged_indices: set[int] = Field(default_factory=set)


class PositionChange(BaseModel):
    """A persisting character whose display index moved."""

    new_index: int
    old_index: int
    char: str
    is_separator: bool
    crossed_group: bool = False


class BarrelWheelSpec(BaseModel):
    """Rolling-digit transition for a single replaced digit.

    ``sequence`` is always in ascending numeric order; ``direction`` tells the
    animation layer which way to play it.
    """

    index: int
    sequence: list[str]
    direction: Literal["up", "down"]

    @property
    def final_digit(self) -> str:
        # Last element of ``sequence``. For "down" wheels this is the OLD digit,
        # not the digit now displayed; the animation layer depends on it as is.
        return self.sequence[-1]

    @property
    def displayed_digit(self) -> str:
        """Digit shown at ``index`` once the edit is committed."""
        return self.sequence[-1] if self.direction == "up" else self.sequence[0]


class EditChanges(ChangeSet):
    """Raw classification of one edit, with every field always present.

    ``kind`` records which strategy produced the sets; ``barrel_wheels`` is keyed by
    raw index and is empty unless a single digit was replaced by another digit.
    """

    kind: Literal["initial", "insert", "delete", "replace", "selection", "content"] = "content"
    barrel_wheels: dict[int, BarrelWheelSpec] = Field(default_factory=dict)
