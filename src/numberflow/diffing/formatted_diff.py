"""Re-express a raw edit in terms of the formatted display string.

A group separator that only moved because digits were added in front of it must not
animate as new. Separators are therefore budgeted by occurrence count: only as many
of each separator character can be ``added`` as the new string has more of them
than the old one.
"""
from __future__ import annotations

from collections import Counter

from ..international.formatting import is_separator
from ..models.changes import CursorContext, FormattedChangeSet
from ..utils.logging import get_logger
from .cursor import raw_position_to_formatted
from .lcs import DEFAULT_MAX_LENGTH, lcs_match

logger = get_logger(__name__)


def separator_counts(formatted: str, locale_decimal: str | None = None) -> Counter[str]:
    """Occurrences of each separator character in *formatted*."""
    return Counter(ch for ch in formatted if is_separator(ch, locale_decimal))


def truly_new_separator_counts(
    old_formatted: str, new_formatted: str, locale_decimal: str | None = None
) -> dict[str, int]:
    """``max(0, new - old)`` occurrences per separator character."""
    old_counts = separator_counts(old_formatted, locale_decimal)
    new_counts = separator_counts(new_formatted, locale_decimal)
    return {char: max(0, count - old_counts[char]) for char, count in new_counts.items()}


def _non_separator_indices(formatted: str, locale_decimal: str | None) -> list[int]:
    return [i for i, ch in enumerate(formatted) if not is_separator(ch, locale_decimal)]


def _context_span(
    old_formatted: str, new_formatted: str, context: CursorContext, locale_decimal: str | None
) -> range | None:
    old_raw_length = len(_non_separator_indices(old_formatted, locale_decimal))
    new_raw_length = len(_non_separator_indices(new_formatted, locale_decimal))
    if context.old_length != old_raw_length:
        return None
    if not 0 <= context.selection_start <= context.cursor_position <= new_raw_length:
        return None
    # Characters replaced by the edit must have existed after the selection start
    inserted = context.cursor_position - context.selection_start
    removed = old_raw_length - (new_raw_length - inserted)
    if not 0 <= removed <= old_raw_length - context.selection_start:
        return None
    start = raw_position_to_formatted(context.selection_start, new_formatted, locale_decimal)
    end = raw_position_to_formatted(context.cursor_position, new_formatted, locale_decimal)
    return range(start, end)


def diff_formatted(
    old_formatted: str,
    new_formatted: str,
    context: CursorContext | None = None,
    locale_decimal: str | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> FormattedChangeSet:
    """Split the new formatted string into added and unchanged indices.

    With raw *context*, the raw insertion span ``[selection_start, cursor_position)``
    is mapped into formatted space and its digits are added. Without it, digits are
    aligned by LCS against the old string and unmatched ones are added. In both cases
    separators are added left to right while their truly-new budget lasts, wherever
    they sit: a digit typed at the end can create a separator near the start.
    """
    result = FormattedChangeSet()
    budget = truly_new_separator_counts(old_formatted, new_formatted, locale_decimal)
    new_non_separators = _non_separator_indices(new_formatted, locale_decimal)

    span = _context_span(old_formatted, new_formatted, context, locale_decimal) if context is not None else None
    if context is not None and span is None:
        logger.debug(
            "formatted_diff_fallback",
            cursor_position=context.cursor_position,
            selection_start=context.selection_start,
            old_length=context.old_length,
        )

    if span is not None:
        added_digits = {i for i in new_non_separators if i in span}
    else:
        old_non_separators = _non_separator_indices(old_formatted, locale_decimal)
        matches = lcs_match(
            [old_formatted[i] for i in old_non_separators],
            [new_formatted[i] for i in new_non_separators],
            max_length=max_length,
        )
        matched = {new_non_separators[j] for _, j in matches}
        added_digits = set(new_non_separators) - matched

    for index, char in enumerate(new_formatted):
        if is_separator(char, locale_decimal):
            if budget.get(char, 0) > 0:
                budget[char] -= 1
                result.added_indices.add(index)
            else:
                result.unchanged_indices.add(index)
        elif index in added_digits:
            result.added_indices.add(index)
        else:
            result.unchanged_indices.add(index)
    return result
