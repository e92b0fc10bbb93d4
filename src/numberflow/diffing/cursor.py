"""Map caret offsets between raw and formatted strings.

Both directions count non-separator characters (digits, sign, decimal), which exist
one-for-one in the raw and the formatted value.
"""
from __future__ import annotations

from ..international.formatting import is_separator


def raw_position_to_formatted(raw_pos: int, formatted: str, locale_decimal: str | None = None) -> int:
    """Formatted index just before the ``raw_pos``-th non-separator character.

    Positions past the last raw character map to ``len(formatted)``.
    """
    if raw_pos <= 0:
        return 0
    count = 0
    for index, char in enumerate(formatted):
        if is_separator(char, locale_decimal):
            continue
        if count == raw_pos:
            return index
        count += 1
    return len(formatted)


def formatted_position_to_raw(formatted_pos: int, formatted: str, locale_decimal: str | None = None) -> int:
    """Number of non-separator characters strictly before ``formatted_pos``."""
    if formatted_pos <= 0:
        return 0
    return sum(1 for char in formatted[:formatted_pos] if not is_separator(char, locale_decimal))
