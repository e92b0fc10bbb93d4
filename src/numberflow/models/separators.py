"""Locale number-format data types.

``Separators`` is the pair of display characters a locale uses; ``GroupingStyle``
describes how the integer part is split into groups; ``LocaleNumberFormat`` bundles
both for a resolved locale tag.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, model_validator

_RAW_CHAR = re.compile(r"[0-9\-]")


class Separators(BaseModel):
    """Decimal and group separator characters used for display."""

    decimal: str = "."
    group: str = ","

    @model_validator(mode="after")
    def _check_distinct(self) -> Separators:
        if len(self.decimal) != 1 or len(self.group) != 1:
            raise ValueError("separators must be single characters")
        if self.decimal == self.group:
            raise ValueError(f"decimal and group separators must differ, got {self.decimal!r} twice")
        if _RAW_CHAR.fullmatch(self.decimal) or _RAW_CHAR.fullmatch(self.group):
            raise ValueError("separators cannot be digits or the minus sign")
        return self


class GroupingStyle(BaseModel):
    """How integer digits are grouped.

    ``primary`` is the size of the rightmost group, ``secondary`` the size of every
    group to its left (3/3 for Western grouping, 3/2 for Indian lakh/crore grouping).
    ``min_grouping_digits`` mirrors CLDR: with 2, a four-digit integer stays ungrouped.
    """

    primary: int = Field(default=3, ge=1)
    secondary: int = Field(default=3, ge=1)
    min_grouping_digits: int = Field(default=1, ge=1)


class LocaleNumberFormat(BaseModel):
    """Resolved number-format conventions for one locale."""

    locale: str
    separators: Separators = Field(default_factory=Separators)
    grouping: GroupingStyle = Field(default_factory=GroupingStyle)
