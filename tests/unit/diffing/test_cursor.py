"""Test raw/formatted caret mapping."""
import pytest

from numberflow.diffing.cursor import formatted_position_to_raw, raw_position_to_formatted


class TestRawToFormatted:
    @pytest.mark.parametrize("raw_pos,expected", [
        (0, 0), (1, 2), (2, 3), (3, 4), (4, 6), (5, 7), (6, 8), (7, 9), (8, 10), (9, 11),
    ])
    def test_grouped_value(self, raw_pos, expected):
        # raw "1234567.5" → formatted "1,234,567.5"
        assert raw_position_to_formatted(raw_pos, "1,234,567.5") == expected

    def test_past_end(self):
        assert raw_position_to_formatted(99, "1,234") == 5

    def test_negative(self):
        assert raw_position_to_formatted(-1, "1,234") == 0

    def test_locale_decimal(self):
        assert raw_position_to_formatted(2, "1.234,5", locale_decimal=",") == 3


class TestFormattedToRaw:
    def test_counts_non_separators(self):
        assert formatted_position_to_raw(2, "1,234") == 1
        assert formatted_position_to_raw(1, "1,234") == 1
        assert formatted_position_to_raw(5, "1,234") == 4

    def test_bounds(self):
        assert formatted_position_to_raw(0, "1,234") == 0
        assert formatted_position_to_raw(50, "1,234") == 4


class TestMappingProperties:
    @pytest.mark.parametrize("formatted", ["", "0", "1,234", "-12,345.678", "12,34,567", "1 000 000"])
    def test_monotonic_and_round_trip(self, formatted):
        raw_length = formatted_position_to_raw(len(formatted), formatted)
        mapped = [raw_position_to_formatted(p, formatted) for p in range(raw_length + 1)]
        assert mapped == sorted(mapped)
        for p, f in enumerate(mapped):
            assert formatted_position_to_raw(f, formatted) == p
