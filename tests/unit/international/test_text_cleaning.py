"""Test raw value cleaning and parsing."""
import pytest

from numberflow.international.text_cleaning import clean_text, parse_number_value


class TestCleanText:
    def test_strips_foreign_characters(self):
        assert clean_text("$1,234.56 USD").cleaned_text == "1234.56"

    def test_keeps_only_leading_minus(self):
        assert clean_text("-12-3-").cleaned_text == "-123"

    def test_minus_not_first_is_dropped(self):
        assert clean_text("12-3").cleaned_text == "123"

    def test_keeps_first_decimal_point(self):
        assert clean_text("1.2.3").cleaned_text == "1.23"

    def test_strips_leading_zeros(self):
        result = clean_text("0012")
        assert result.cleaned_text == "12"
        assert result.leading_zeros_removed == 2

    def test_single_zero_survives(self):
        result = clean_text("000")
        assert result.cleaned_text == "0"
        assert result.leading_zeros_removed == 2

    def test_zero_kept_before_decimal(self):
        result = clean_text("00.5")
        assert result.cleaned_text == "0.5"
        assert result.leading_zeros_removed == 1

    def test_zero_point_untouched(self):
        result = clean_text("0.05")
        assert result.cleaned_text == "0.05"
        assert result.leading_zeros_removed == 0

    def test_negative_leading_zeros(self):
        assert clean_text("-007").cleaned_text == "-7"
        assert clean_text("-00.5").cleaned_text == "-0.5"
        assert clean_text("-0").cleaned_text == "-0"

    @pytest.mark.parametrize("text,expected", [
        (".5", "0.5"), ("-.5", "-0.5"), (".", "0."), ("5", "5"),
    ])
    def test_auto_add_leading_zero(self, text, expected):
        result = clean_text(text, auto_add_leading_zero=True)
        assert result.cleaned_text == expected
        assert result.leading_zero_added is (text != "5")

    def test_leading_decimal_kept_without_auto_zero(self):
        result = clean_text(".5")
        assert result.cleaned_text == ".5"
        assert result.leading_zero_added is False

    @pytest.mark.parametrize("text", ["", "-", ".", "-."])
    def test_intermediate_states_pass_through(self, text):
        assert clean_text(text).cleaned_text == text


class TestParseNumberValue:
    @pytest.mark.parametrize("raw", ["", "-", ".", "-."])
    def test_intermediate_states_are_none(self, raw):
        assert parse_number_value(raw) is None

    def test_parses_values(self):
        assert parse_number_value("1234.5") == 1234.5
        assert parse_number_value("-.5") == -0.5
        assert parse_number_value("123.") == 123.0

    def test_rejects_non_grammar(self):
        assert parse_number_value("nan") is None
        assert parse_number_value("1,234") is None
