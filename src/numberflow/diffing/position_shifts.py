"""Detect persisting characters that move between two formatted renderings.

Separators are paired by occurrence (the Nth comma before with the Nth comma after);
digits are paired by LCS alignment and reported when they end up in a different
digit group, e.g. the ``2`` of ``1,234`` moving to the first group of ``12,345``.
"""
from __future__ import annotations

from collections import defaultdict

from ..international.formatting import is_separator
from ..models.changes import PositionChange
from .lcs import DEFAULT_MAX_LENGTH, lcs_match


def _separator_positions(formatted: str, locale_decimal: str | None) -> dict[str, list[int]]:
    positions: dict[str, list[int]] = defaultdict(list)
    for index, char in enumerate(formatted):
        if is_separator(char, locale_decimal):
            positions[char].append(index)
    return positions


def _group_numbers(formatted: str, locale_decimal: str | None) -> list[tuple[int, int]]:
    """``(formatted_index, group_number)`` for every non-separator character."""
    groups: list[tuple[int, int]] = []
    separators_seen = 0
    for index, char in enumerate(formatted):
        if is_separator(char, locale_decimal):
            separators_seen += 1
        else:
            groups.append((index, separators_seen))
    return groups


def detect_position_shifts(
    old_formatted: str,
    new_formatted: str,
    locale_decimal: str | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> list[PositionChange]:
    """List the persisting characters of *new_formatted* that changed position.

    Always aligns by content; cursor context says nothing about where surviving
    characters end up. Ordered by new index.
    """
    changes: list[PositionChange] = []

    old_separators = _separator_positions(old_formatted, locale_decimal)
    for char, new_positions in _separator_positions(new_formatted, locale_decimal).items():
        for new_index, old_index in zip(new_positions, old_separators.get(char, [])):
            if new_index != old_index:
                changes.append(PositionChange(
                    new_index=new_index,
                    old_index=old_index,
                    char=char,
                    is_separator=True,
                ))

    old_groups = _group_numbers(old_formatted, locale_decimal)
    new_groups = _group_numbers(new_formatted, locale_decimal)
    matches = lcs_match(
        [old_formatted[i] for i, _ in old_groups],
        [new_formatted[i] for i, _ in new_groups],
        max_length=max_length,
    )
    for old_pos, new_pos in matches:
        old_index, old_group = old_groups[old_pos]
        new_index, new_group = new_groups[new_pos]
        if old_group != new_group:
            changes.append(PositionChange(
                new_index=new_index,
                old_index=old_index,
                char=new_formatted[new_index],
                is_separator=False,
                crossed_group=True,
            ))

    changes.sort(key=lambda change: change.new_index)
    return changes
