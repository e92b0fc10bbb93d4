"""Classify every character of a raw edit as added, removed, unchanged or changed.

Cursor context is preferred over content matching: typing a fifth ``8`` into
``8888`` is ambiguous for a content diff, but the caret says exactly where it went.
"""
from __future__ import annotations

from ..models.changes import ChangeSet, CursorContext
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _classify_pair(changes: ChangeSet, old_raw: str, new_raw: str, old_index: int, new_index: int) -> None:
    if 0 <= old_index < len(old_raw) and old_raw[old_index] == new_raw[new_index]:
        changes.unchanged_indices.add(new_index)
    else:
        changes.changed_indices.add(new_index)


def _context_is_consistent(old_raw: str, new_raw: str, context: CursorContext) -> bool:
    length_diff = len(new_raw) - len(old_raw)
    if context.old_length != len(old_raw):
        return False
    if not 0 <= context.cursor_position <= len(new_raw):
        return False
    if length_diff > 0:
        return context.cursor_position - length_diff >= 0
    if length_diff < 0:
        return 0 <= context.selection_start and context.selection_start - length_diff <= len(old_raw)
    return True


def _diff_by_position(old_raw: str, new_raw: str, context: CursorContext) -> ChangeSet:
    changes = ChangeSet()
    length_diff = len(new_raw) - len(old_raw)

    if length_diff > 0:
        insert_start = context.cursor_position - length_diff
        for i in range(insert_start):
            _classify_pair(changes, old_raw, new_raw, i, i)
        changes.added_indices.update(range(insert_start, context.cursor_position))
        for i in range(context.cursor_position, len(new_raw)):
            _classify_pair(changes, old_raw, new_raw, i - length_diff, i)

    elif length_diff < 0:
        delete_start = context.selection_start
        deleted = -length_diff
        changes.removed_indices.update(range(delete_start, delete_start + deleted))
        for i in range(min(delete_start, len(new_raw))):
            _classify_pair(changes, old_raw, new_raw, i, i)
        for i in range(delete_start, len(new_raw)):
            _classify_pair(changes, old_raw, new_raw, i + deleted, i)

    else:
        for i in range(len(new_raw)):
            _classify_pair(changes, old_raw, new_raw, i, i)

    return changes


def _diff_by_content(old_raw: str, new_raw: str) -> ChangeSet:
    changes = ChangeSet()
    limit = min(len(old_raw), len(new_raw))

    prefix = 0
    while prefix < limit and old_raw[prefix] == new_raw[prefix]:
        prefix += 1
    suffix = 0
    while suffix < limit - prefix and old_raw[-1 - suffix] == new_raw[-1 - suffix]:
        suffix += 1

    changes.unchanged_indices.update(range(prefix))
    changes.unchanged_indices.update(range(len(new_raw) - suffix, len(new_raw)))

    old_middle = range(prefix, len(old_raw) - suffix)
    new_middle = range(prefix, len(new_raw) - suffix)
    if len(old_middle) == len(new_middle) and len(new_middle) > 0:
        for i in new_middle:
            _classify_pair(changes, old_raw, new_raw, i, i)
    else:
        changes.removed_indices.update(old_middle)
        changes.added_indices.update(new_middle)
    return changes


def diff_raw(old_raw: str, new_raw: str, context: CursorContext | None = None) -> ChangeSet:
    """Diff two raw values.

    With *context* the edit site is known and characters are classified by
    position: insertions span ``[cursor - lengthDiff, cursor)``, deletions remove
    ``[selection_start, selection_start - lengthDiff)`` from the old value, and
    same-length edits compare index by index. Without context, or when the context
    does not fit the two strings, the common prefix and suffix are kept and the
    middle is diffed by content.
    """
    if context is not None:
        if _context_is_consistent(old_raw, new_raw, context):
            return _diff_by_position(old_raw, new_raw, context)
        logger.debug(
            "raw_diff_fallback",
            old_length=len(old_raw),
            new_length=len(new_raw),
            cursor_position=context.cursor_position,
            selection_start=context.selection_start,
            context_old_length=context.old_length,
        )
    return _diff_by_content(old_raw, new_raw)
