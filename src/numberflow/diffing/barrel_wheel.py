"""Single-digit replacement detection and in-flight wheel bookkeeping.

A barrel wheel rolls one digit position through every value between its old and new
digit. It is created when a one-character selection is overwritten by a different
digit, and it must follow its digit while the user keeps editing around it.
"""
from __future__ import annotations

from collections.abc import Iterable

from ..models.changes import BarrelWheelSpec, CursorContext, EditChanges
from ..utils.logging import get_logger
from .raw_diff import diff_raw

logger = get_logger(__name__)

_DIGITS = '0123456789'


def _is_digit(char: str) -> bool:
    return len(char) == 1 and char in _DIGITS


def detect_barrel_wheel(
    old_raw: str,
    new_raw: str,
    selection_start: int,
    selection_end: int,
    new_cursor_pos: int,
) -> BarrelWheelSpec | None:
    """Return a wheel spec when exactly one selected digit became another digit.

    ``sequence`` is the inclusive run between the two digits in ascending order for
    both directions: ``2`` → ``5`` gives ``["2", "3", "4", "5"]`` going up and
    ``5`` → ``2`` gives the same list going down.
    """
    if selection_start == selection_end:
        return None
    if selection_end - selection_start != 1 or new_cursor_pos - selection_start != 1:
        return None
    if not (0 <= selection_start < len(old_raw) and selection_start < len(new_raw)):
        return None

    old_char = old_raw[selection_start]
    new_char = new_raw[selection_start]
    if not (_is_digit(old_char) and _is_digit(new_char)) or old_char == new_char:
        return None

    old_digit, new_digit = int(old_char), int(new_char)
    low, high = min(old_digit, new_digit), max(old_digit, new_digit)
    return BarrelWheelSpec(
        index=selection_start,
        sequence=[str(d) for d in range(low, high + 1)],
        direction='up' if new_digit > old_digit else 'down',
    )


def _selection_is_consistent(
    old_raw: str, new_raw: str, selection_start: int, selection_end: int, new_cursor_pos: int
) -> bool:
    if not 0 <= selection_start <= selection_end <= len(old_raw):
        return False
    if new_cursor_pos < selection_start or new_cursor_pos > len(new_raw):
        return False
    replaced = selection_end - selection_start
    inserted = new_cursor_pos - selection_start
    return len(new_raw) == len(old_raw) - replaced + inserted


def diff_selection_replacement(
    old_raw: str,
    new_raw: str,
    selection_start: int,
    selection_end: int,
    new_cursor_pos: int,
) -> EditChanges:
    """Classify an edit that replaced ``old_raw[selection_start:selection_end]``.

    Covers typing over a selection, cutting, and Backspace/Delete (which report the
    deleted character as the selection). Characters before the selection and after
    the inserted text are compared pairwise; the inserted text is added, except a
    barrel-wheel digit which is ``changed`` in place.
    """
    if not old_raw:
        return EditChanges(kind='initial', added_indices=set(range(len(new_raw))))

    if selection_start == selection_end:
        context = CursorContext(
            cursor_position=new_cursor_pos,
            selection_start=selection_start,
            old_length=len(old_raw),
        )
        changes = diff_raw(old_raw, new_raw, context)
        length_diff = len(new_raw) - len(old_raw)
        kind = 'insert' if length_diff > 0 else 'delete' if length_diff < 0 else 'replace'
        return EditChanges(kind=kind, **changes.model_dump())

    if not _selection_is_consistent(old_raw, new_raw, selection_start, selection_end, new_cursor_pos):
        logger.debug(
            "selection_diff_fallback",
            old_length=len(old_raw),
            new_length=len(new_raw),
            selection_start=selection_start,
            selection_end=selection_end,
            cursor_position=new_cursor_pos,
        )
        return EditChanges(kind='content', **diff_raw(old_raw, new_raw).model_dump())

    changes = EditChanges(kind='selection')
    wheel = detect_barrel_wheel(old_raw, new_raw, selection_start, selection_end, new_cursor_pos)
    if wheel is not None:
        changes.barrel_wheels[wheel.index] = wheel

    for i in range(selection_start):
        if old_raw[i] == new_raw[i]:
            changes.unchanged_indices.add(i)
        else:
            changes.changed_indices.add(i)

    for i in range(selection_start, new_cursor_pos):
        if i in changes.barrel_wheels:
            changes.changed_indices.add(i)
        else:
            changes.added_indices.add(i)

    removed = set(range(selection_start, selection_end))
    if wheel is not None:
        removed.discard(wheel.index)
    changes.removed_indices = removed

    tail = len(old_raw) - selection_end
    for offset in range(tail):
        old_index = selection_end + offset
        new_index = new_cursor_pos + offset
        if old_raw[old_index] == new_raw[new_index]:
            changes.unchanged_indices.add(new_index)
        else:
            changes.changed_indices.add(new_index)
    return changes


def shift_barrel_wheel(
    spec: BarrelWheelSpec,
    edit_position: int,
    delta: int,
    new_length: int | None = None,
) -> BarrelWheelSpec | None:
    """Re-index an in-flight wheel after an edit elsewhere in the value.

    A positive *delta* inserts that many characters at *edit_position*; a negative one
    deletes ``-delta`` characters starting there. Returns ``None`` when the wheel's own
    digit was deleted, or when the new index falls outside a value of *new_length*.
    """
    index = spec.index
    if delta > 0 and edit_position <= index:
        index += delta
    elif delta < 0:
        deleted_end = edit_position - delta
        if edit_position <= index < deleted_end:
            return None
        if deleted_end <= index:
            index += delta

    if index < 0 or (new_length is not None and index >= new_length):
        return None
    if index == spec.index:
        return spec
    return spec.model_copy(update={'index': index})


def shift_barrel_wheels(
    wheels: Iterable[BarrelWheelSpec],
    new_raw: str,
    edit_position: int,
    removed: int = 0,
    inserted: int = 0,
) -> list[BarrelWheelSpec]:
    """Carry wheels across an edit that replaced *removed* characters with *inserted*.

    Wheels whose digit was removed, or whose adjusted index no longer shows the
    digit the wheel rolls to, are discarded rather than animating the wrong character.
    """
    kept: list[BarrelWheelSpec] = []
    for wheel in wheels:
        shifted: BarrelWheelSpec | None = wheel
        if removed:
            shifted = shift_barrel_wheel(shifted, edit_position, -removed)
        if shifted is not None and inserted:
            shifted = shift_barrel_wheel(shifted, edit_position, inserted)
        if shifted is not None and (
            shifted.index >= len(new_raw) or new_raw[shifted.index] != shifted.displayed_digit
        ):
            shifted = None

        if shifted is None:
            logger.debug("barrel_wheel_discarded", index=wheel.index, edit_position=edit_position)
            continue
        kept.append(shifted)
    return kept
