"""Edit pipeline: clean → raw diff → format → formatted diff → shifts → wheels → caret."""
from __future__ import annotations

from collections.abc import Sequence

from .config import Settings, get_settings
from .diffing.barrel_wheel import diff_selection_replacement, shift_barrel_wheels
from .diffing.cursor import raw_position_to_formatted
from .diffing.formatted_diff import diff_formatted
from .diffing.position_shifts import detect_position_shifts
from .editing import delete_text, insert_text
from .international.formatting import format_value
from .international.separators import resolve_number_format
from .international.text_cleaning import clean_text, parse_number_value
from .models.changes import BarrelWheelSpec, CursorContext
from .models.edit import EditRequest, EditResult, FormatOptions
from .utils.logging import get_logger

logger = get_logger(__name__)


class EditPipeline:
    """Processes one edit at a time against an explicitly supplied previous value.

    The pipeline keeps configuration (locale, separators, display options) but no
    edit state: callers pass the previous raw value inside each request, and the
    previous formatted value and in-flight wheels alongside it.
    """

    def __init__(self, settings: Settings | None = None, locale: str | None = None):
        self.settings = settings or get_settings()
        self.locale = locale
        number_format = resolve_number_format(locale, default_locale=self.settings.default_locale)
        self.separators = number_format.separators
        self.options = FormatOptions(
            locale=number_format.locale,
            format=self.settings.format,
            auto_add_leading_zero=self.settings.auto_add_leading_zero,
            separators=self.separators,
            grouping=number_format.grouping,
        )

    def format(self, raw_value: str) -> str:
        """Render *raw_value* with this pipeline's options."""
        return format_value(raw_value, self.options)

    def insert(self, raw: str, text: str, selection_start: int, selection_end: int, **kwargs) -> EditResult:
        """Type or paste *text* over the selection and process the edit."""
        request = insert_text(
            raw, text, selection_start, selection_end,
            max_length=self.settings.max_length,
            separators=self.separators,
        )
        return self.process(request, **kwargs)

    def delete(self, raw: str, selection_start: int, selection_end: int, forward: bool = False, **kwargs) -> EditResult:
        """Backspace/Delete at the caret or over the selection and process the edit."""
        return self.process(delete_text(raw, selection_start, selection_end, forward=forward), **kwargs)

    def process(
        self,
        request: EditRequest,
        previous_formatted: str | None = None,
        barrel_wheels: Sequence[BarrelWheelSpec] = (),
    ) -> EditResult:
        """Run one edit through every stage and describe what the display must do."""
        old_raw = request.previous_raw
        if previous_formatted is None:
            previous_formatted = self.format(old_raw)

        # Step 1: Normalise the proposed text and keep the caret on the same digit
        cleaned = clean_text(request.proposed_text, self.options.auto_add_leading_zero)
        new_raw = cleaned.cleaned_text
        cursor = request.cursor_position
        if cleaned.leading_zeros_removed and cursor > 0:
            cursor = max(0, cursor - cleaned.leading_zeros_removed)
        if cleaned.leading_zero_added:
            cursor += 1
        cursor = min(max(cursor, 0), len(new_raw))

        # Step 2: Leading-zero edits are compared against an empty value
        compare_old = old_raw
        selection_start, selection_end = request.selection_start, request.selection_end
        compare_cursor = cursor
        rebased = _rebase_leading_zero_edit(old_raw, new_raw)
        if rebased:
            compare_old = ''
            selection_start = selection_end = 0
            compare_cursor = len(new_raw)

        # Step 3: Raw classification (barrel-wheel aware when a selection was replaced)
        changes = diff_selection_replacement(
            compare_old, new_raw, selection_start, selection_end, compare_cursor
        )

        # Step 4: Formatted classification and persisting-character moves
        new_formatted = self.format(new_raw)
        formatted_changes = diff_formatted(
            self.format(compare_old),
            new_formatted,
            CursorContext(
                cursor_position=compare_cursor,
                selection_start=selection_start,
                old_length=len(compare_old),
            ),
            locale_decimal=self.separators.decimal,
            max_length=self.settings.lcs_max_length,
        )
        position_changes = detect_position_shifts(
            previous_formatted,
            new_formatted,
            locale_decimal=self.separators.decimal,
            max_length=self.settings.lcs_max_length,
        )

        # Step 5: Carry in-flight wheels across the edit, then add the new ones
        if rebased or cleaned.leading_zeros_removed or cleaned.leading_zero_added:
            kept_wheels: list[BarrelWheelSpec] = []
            if barrel_wheels:
                logger.debug("barrel_wheels_discarded_on_rebase", count=len(barrel_wheels))
        else:
            kept_wheels = shift_barrel_wheels(
                barrel_wheels,
                new_raw,
                edit_position=request.selection_start,
                removed=request.selection_end - request.selection_start,
                inserted=cursor - request.selection_start,
            )
        wheels = [w for w in kept_wheels if w.index not in changes.barrel_wheels]
        wheels.extend(changes.barrel_wheels.values())
        wheels.sort(key=lambda wheel: wheel.index)

        # Step 6: Caret in display space
        formatted_cursor = raw_position_to_formatted(cursor, new_formatted, self.separators.decimal)

        logger.info(
            "edit_processed",
            kind=changes.kind,
            old_length=len(old_raw),
            new_length=len(new_raw),
            added=len(formatted_changes.added_indices),
            barrel_wheels=len(wheels),
        )

        return EditResult(
            previous_raw=old_raw,
            previous_formatted=previous_formatted,
            raw_value=new_raw,
            formatted_value=new_formatted,
            number_value=parse_number_value(new_raw),
            cursor_position=cursor,
            formatted_cursor_position=formatted_cursor,
            changes=changes,
            formatted_changes=formatted_changes,
            position_changes=position_changes,
            barrel_wheels=wheels,
        )


def _rebase_leading_zero_edit(old_raw: str, new_raw: str) -> bool:
    """True when the edit should animate as if the value was typed from scratch.

    Deleting the ``.`` of ``0.122`` leaves ``122`` (the zero is cleaned away) and
    overwriting a lone ``0`` replaces it entirely; positional diffing against the
    old value would misalign every digit in both cases.
    """
    deleted_decimal_after_zero = (
        old_raw.startswith('0.')
        and not new_raw.startswith('0')
        and len(new_raw) > 0
        and len(old_raw) > len(new_raw)
        and '.' not in new_raw
    )
    replaced_leading_zero = (
        old_raw == '0'
        and len(new_raw) > 0
        and new_raw[0] != '0'
    )
    return deleted_decimal_after_zero or replaced_leading_zero
