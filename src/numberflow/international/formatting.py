"""Render raw numeric strings for display and classify display characters.

The raw form always uses ``.`` as the decimal point, an optional leading ``-`` and
ASCII digits. The four intermediate states (``""``, ``"-"``, ``"."``, ``"-."``) are
valid while typing but are never parsed.
"""
from __future__ import annotations

import re

from ..models.edit import FormatOptions
from ..models.separators import GroupingStyle, Separators
from .separators import resolve_number_format

RAW_VALUE_PATTERN = re.compile(r'-?[0-9]*(?:\.[0-9]*)?')
_RAW_CHAR = re.compile(r'[0-9.\-]')
_DIGIT_OR_MINUS = re.compile(r'[0-9\-]')

INTERMEDIATE_STATES = ('', '-', '.', '-.')


def is_intermediate_state(raw_value: str) -> bool:
    """True for the in-progress values that are not parseable numbers."""
    return raw_value in INTERMEDIATE_STATES


def is_separator(char: str | None, locale_decimal: str | None = None) -> bool:
    """Check if a display character is a grouping separator.

    Without *locale_decimal* anything other than a digit, ``.`` or ``-`` is a
    separator. When the locale decimal is not ``.`` (``de``, ``fr``...), ``.`` can
    itself be the group separator, so classification is done against the locale
    decimal instead.
    """
    if not char:
        return False
    if locale_decimal is None or locale_decimal == '.':
        return not _RAW_CHAR.fullmatch(char)
    return not (_DIGIT_OR_MINUS.fullmatch(char) or char == locale_decimal)


def is_raw_character(char: str | None, locale_decimal: str) -> bool:
    """Check if a typed character carries raw value meaning (digit, decimal, minus)."""
    if not char:
        return False
    return bool(_RAW_CHAR.fullmatch(char)) or char == locale_decimal


def strip_separators(formatted: str, locale_decimal: str | None = None) -> str:
    """Drop every grouping separator, keeping digits, sign and decimal."""
    return ''.join(ch for ch in formatted if not is_separator(ch, locale_decimal))


def unformat_value(formatted: str, separators: Separators) -> str:
    """Inverse of :func:`format_value`: recover the raw value from display text."""
    stripped = strip_separators(formatted, separators.decimal)
    return stripped.replace(separators.decimal, '.')


def group_integer_digits(digits: str, group: str, grouping: GroupingStyle | None = None) -> str:
    """Insert *group* between digit groups of an unsigned integer digit string."""
    grouping = grouping or GroupingStyle()
    if len(digits) < grouping.primary + grouping.min_grouping_digits:
        return digits

    head, groups = digits[:-grouping.primary], [digits[-grouping.primary:]]
    while len(head) > grouping.secondary:
        groups.append(head[-grouping.secondary:])
        head = head[:-grouping.secondary]
    if head:
        groups.append(head)
    return group.join(reversed(groups))


def _format_intermediate_state(raw_value: str, decimal: str) -> str | None:
    if raw_value == '':
        return ''
    if raw_value == '-':
        return '-'
    if raw_value == '.':
        return decimal
    if raw_value == '-.':
        return '-' + decimal
    return None


def format_value(raw_value: str, options: FormatOptions) -> str:
    """Format a raw value for display.

    Handles intermediate states, user-typed leading decimals, locale decimal
    separators, grouping of the integer part and the trailing ``.`` of a value that
    is still being typed. Decimal digits are always the ones the user typed: trailing
    zeros survive and nothing is rounded. Grouping works on the raw integer digits,
    so stripping the separators again always gives back *raw_value*.
    """
    decimal = options.separators.decimal

    intermediate = _format_intermediate_state(raw_value, decimal)
    if intermediate is not None:
        return intermediate

    if not RAW_VALUE_PATTERN.fullmatch(raw_value):
        return raw_value.replace('.', decimal, 1)

    has_leading_decimal = raw_value.startswith('.') or raw_value.startswith('-.')
    if has_leading_decimal and not options.auto_add_leading_zero:
        return raw_value.replace('.', decimal, 1)

    if not options.format:
        return raw_value.replace('.', decimal, 1)

    sign = '-' if raw_value.startswith('-') else ''
    integer_part, dot, decimal_part = raw_value[len(sign):].partition('.')
    grouping = options.grouping or resolve_number_format(options.locale).grouping

    formatted = sign + group_integer_digits(integer_part, options.separators.group, grouping)
    if decimal_part:
        formatted += decimal + decimal_part

    # "123." keeps its decimal so the user sees what they just typed
    if dot and decimal not in formatted:
        formatted += decimal

    return formatted
