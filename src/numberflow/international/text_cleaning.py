"""Normalise typed or pasted text into a raw numeric value."""
from __future__ import annotations

import re

from ..models.edit import CleanedText
from .formatting import RAW_VALUE_PATTERN, is_intermediate_state

_NON_RAW = re.compile(r'[^0-9.\-]')
_LEADING_ZEROS = re.compile(r'^0+')


def clean_text(text: str, auto_add_leading_zero: bool = False) -> CleanedText:
    """Reduce *text* to the raw grammar ``-?[0-9]*(\\.[0-9]*)?``.

    Rules, in order:
    - drop everything but digits, ``.`` and ``-``
    - keep a minus sign only in first position, and only one
    - keep only the first decimal point
    - strip redundant leading zeros (``0012`` → ``12``, ``-007`` → ``-7``) while keeping
      a single zero before a decimal point (``00.5`` → ``0.5``)
    - optionally prefix a bare leading decimal with zero (``.5`` → ``0.5``)

    ``leading_zeros_removed`` counts the zeros dropped from the front so callers can
    move the caret back by the same amount.
    """
    cleaned = _NON_RAW.sub('', text)

    if cleaned.startswith('-'):
        cleaned = '-' + cleaned[1:].replace('-', '')
    else:
        cleaned = cleaned.replace('-', '')

    first_dot = cleaned.find('.')
    if first_dot >= 0:
        cleaned = cleaned[:first_dot + 1] + cleaned[first_dot + 1:].replace('.', '')

    sign = '-' if cleaned.startswith('-') else ''
    body = cleaned[len(sign):]
    leading_zeros_removed = 0
    if len(body) > 1 and body[0] == '0' and body[1] != '.':
        stripped = _LEADING_ZEROS.sub('', body)
        if stripped == '' or stripped.startswith('.'):
            stripped = '0' + stripped
        leading_zeros_removed = len(body) - len(stripped)
        body = stripped
    cleaned = sign + body

    leading_zero_added = False
    if auto_add_leading_zero:
        if cleaned.startswith('.'):
            cleaned = '0' + cleaned
            leading_zero_added = True
        elif cleaned.startswith('-.'):
            cleaned = '-0' + cleaned[1:]
            leading_zero_added = True

    return CleanedText(
        cleaned_text=cleaned,
        leading_zeros_removed=leading_zeros_removed,
        leading_zero_added=leading_zero_added,
    )


def parse_number_value(raw_value: str) -> float | None:
    """Parse a raw value; ``None`` for intermediate states and malformed input."""
    if is_intermediate_state(raw_value) or not RAW_VALUE_PATTERN.fullmatch(raw_value):
        return None
    return float(raw_value)
