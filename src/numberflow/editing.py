"""Turn key presses and pastes into edit requests against a raw value."""
from __future__ import annotations

import re

from .models.edit import EditRequest
from .models.separators import Separators

_NON_RAW = re.compile(r'[^0-9.\-]')


def _clamp_selection(raw: str, selection_start: int, selection_end: int) -> tuple[int, int]:
    start = min(max(selection_start, 0), len(raw))
    end = min(max(selection_end, 0), len(raw))
    return min(start, end), max(start, end)


def to_raw_input(text: str, separators: Separators | None = None) -> str:
    """Map typed or pasted display text to raw characters.

    Group separators are dropped and the locale decimal becomes ``.``; the locale
    decimal wins when it collides with ``.`` being the group separator (``de``).
    """
    if separators is not None:
        if separators.group != '.':
            text = text.replace(separators.group, '')
        elif separators.decimal in text:
            text = text.replace('.', '')
        text = text.replace(separators.decimal, '.')
    return _NON_RAW.sub('', text)


def insert_text(
    raw: str,
    text: str,
    selection_start: int,
    selection_end: int,
    max_length: int | None = None,
    separators: Separators | None = None,
) -> EditRequest:
    """Replace the selection of *raw* with *text*, honouring *max_length*.

    Inserted text is truncated so the proposed value never grows past
    *max_length*; the caret lands after whatever was actually inserted.
    """
    if max_length is not None and max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")

    start, end = _clamp_selection(raw, selection_start, selection_end)
    insertion = to_raw_input(text, separators)
    if max_length is not None:
        available = max(0, max_length - (len(raw) - (end - start)))
        insertion = insertion[:available]

    return EditRequest(
        previous_raw=raw,
        proposed_text=raw[:start] + insertion + raw[end:],
        selection_start=start,
        selection_end=end,
        cursor_position=start + len(insertion),
    )


def delete_text(raw: str, selection_start: int, selection_end: int, forward: bool = False) -> EditRequest:
    """Backspace (or Delete when *forward*) at the caret or over a selection.

    The deleted span is reported as the request's selection, so Backspace at
    caret 3 becomes a replacement of ``[2, 3)`` with nothing.
    """
    start, end = _clamp_selection(raw, selection_start, selection_end)
    if start == end:
        if forward and end < len(raw):
            end += 1
        elif not forward and start > 0:
            start -= 1

    return EditRequest(
        previous_raw=raw,
        proposed_text=raw[:start] + raw[end:],
        selection_start=start,
        selection_end=end,
        cursor_position=start,
    )
