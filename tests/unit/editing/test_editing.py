"""Test insertion and deletion helpers."""
import pytest

from numberflow.editing import delete_text, insert_text, to_raw_input
from numberflow.models.separators import Separators


class TestToRawInput:
    def test_plain(self):
        assert to_raw_input("12a3") == "123"

    def test_us_paste(self):
        assert to_raw_input("1,234.5", Separators()) == "1234.5"

    def test_german_paste(self):
        assert to_raw_input("1.234,5", Separators(decimal=",", group=".")) == "1234.5"

    def test_german_typed_dot_is_decimal(self):
        assert to_raw_input(".", Separators(decimal=",", group=".")) == "."

    def test_french_space_group(self):
        assert to_raw_input("1 234,5", Separators(decimal=",", group=" ")) == "1234.5"


class TestInsertText:
    def test_typing_at_caret(self):
        request = insert_text("123", "4", 3, 3)
        assert request.proposed_text == "1234"
        assert request.cursor_position == 4
        assert (request.selection_start, request.selection_end) == (3, 3)
        assert request.previous_raw == "123"

    def test_replacing_selection(self):
        request = insert_text("12345", "9", 1, 4)
        assert request.proposed_text == "195"
        assert request.cursor_position == 2

    def test_reversed_selection_is_normalised(self):
        assert insert_text("12345", "9", 4, 1).proposed_text == "195"

    def test_max_length_truncates_paste(self):
        request = insert_text("12", "3456", 2, 2, max_length=4)
        assert request.proposed_text == "1234"
        assert request.cursor_position == 4

    def test_max_length_full(self):
        request = insert_text("1234", "5", 4, 4, max_length=4)
        assert request.proposed_text == "1234"
        assert request.cursor_position == 4

    def test_negative_max_length_rejected(self):
        with pytest.raises(ValueError):
            insert_text("1", "2", 1, 1, max_length=-1)

    def test_out_of_range_offsets_clamped(self):
        assert insert_text("12", "3", 10, 10).proposed_text == "123"


class TestDeleteText:
    def test_backspace(self):
        request = delete_text("1234", 3, 3)
        assert request.proposed_text == "124"
        assert (request.selection_start, request.selection_end) == (2, 3)
        assert request.cursor_position == 2

    def test_backspace_at_start_is_noop(self):
        request = delete_text("1234", 0, 0)
        assert request.proposed_text == "1234"
        assert request.selection_start == request.selection_end == 0

    def test_forward_delete(self):
        request = delete_text("1234", 1, 1, forward=True)
        assert request.proposed_text == "134"
        assert (request.selection_start, request.selection_end) == (1, 2)

    def test_forward_delete_at_end_is_noop(self):
        assert delete_text("1234", 4, 4, forward=True).proposed_text == "1234"

    def test_delete_selection(self):
        request = delete_text("123.456", 4, 7)
        assert request.proposed_text == "123."
        assert request.cursor_position == 4
