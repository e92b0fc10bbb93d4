"""Inputs and outputs of the edit pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field

from numberflow.models.changes import (
    BarrelWheelSpec,
    EditChanges,
    FormattedChangeSet,
    PositionChange,
)
from numberflow.models.separators import GroupingStyle, Separators


class FormatOptions(BaseModel):
    """Options for rendering a raw value."""

    locale: str | None = None
    format: bool = False
    auto_add_leading_zero: bool = False
    separators: Separators = Field(default_factory=Separators)
    # Resolved from ``locale`` when not given
    grouping: GroupingStyle | None = None


class CleanedText(BaseModel):
    """Result of normalising typed or pasted text into a raw value."""

    cleaned_text: str
    leading_zeros_removed: int = 0
    leading_zero_added: bool = False


class EditRequest(BaseModel):
    """One user edit, expressed in raw-string offsets.

    ``[selection_start, selection_end)`` is the span of ``previous_raw`` that was
    replaced (collapsed for a plain insertion; the deleted character for Backspace
    and Delete), ``cursor_position`` is the caret in ``proposed_text``.
    """

    previous_raw: str = ""
    proposed_text: str
    selection_start: int
    selection_end: int
    cursor_position: int


class EditResult(BaseModel):
    """Everything the rendering layer needs after one edit."""

    previous_raw: str
    previous_formatted: str
    raw_value: str
    formatted_value: str
    number_value: float | None = None
    cursor_position: int
    formatted_cursor_position: int
    changes: EditChanges
    formatted_changes: FormattedChangeSet
    position_changes: list[PositionChange] = Field(default_factory=list)
    barrel_wheels: list[BarrelWheelSpec] = Field(default_factory=list)
