"""Tests for the built-in format predicates."""

from fieldcheck.validators.rules import get_all_default_rules
from fieldcheck.validators.rules.format_rules import (
    is_alphabet,
    is_comma_separated_number,
    is_number,
    is_sort_format,
)


class TestIsNumber:
    def test_valid_numbers(self):
        for s in ["42", "-3.5", ".5", "+7", "0", "0.25", "5.", "-.75", "1000"]:
            assert is_number(s) is True, f"Rejected number: {s!r}"

    def test_invalid_numbers(self):
        for s in ["", "12.3.4", "abc", "--1", "+-1", "1e5", "01", "1a", " 1", "."]:
            assert is_number(s) is False, f"Accepted non-number: {s!r}"

    def test_blank_is_invalid(self):
        assert is_number("   ") is False
        assert is_number("\t") is False

    def test_trailing_newline_is_invalid(self):
        assert is_number("42\n") is False

    def test_non_ascii_digits_are_invalid(self):
        assert is_number("٤٢") is False  # Arabic-Indic 42


class TestIsCommaSeparatedNumber:
    def test_valid_lists(self):
        assert is_comma_separated_number("1,2,3") is True
        assert is_comma_separated_number("42") is True
        assert is_comma_separated_number("-1.5,.5,+3") is True

    def test_empty_segment(self):
        assert is_comma_separated_number("1,,3") is False

    def test_leading_and_trailing_commas(self):
        assert is_comma_separated_number(",1") is False
        assert is_comma_separated_number("1,") is False

    def test_spaces_around_segments(self):
        assert is_comma_separated_number("1, 2") is False

    def test_non_number_segment(self):
        assert is_comma_separated_number("1,two,3") is False

    def test_blank_is_invalid(self):
        assert is_comma_separated_number("") is False
        assert is_comma_separated_number("  ") is False


class TestIsAlphabet:
    def test_letters_only(self):
        assert is_alphabet("Hello") is True
        assert is_alphabet("x") is True

    def test_rejects_digits(self):
        assert is_alphabet("Hello1") is False

    def test_rejects_whitespace_and_punctuation(self):
        assert is_alphabet("Hello World") is False
        assert is_alphabet("don't") is False
        assert is_alphabet("snake_case") is False

    def test_rejects_non_ascii_letters(self):
        assert is_alphabet("café") is False

    def test_blank_is_invalid(self):
        assert is_alphabet("") is False
        assert is_alphabet(" ") is False


class TestIsSortFormat:
    def test_field_only(self):
        assert is_sort_format("name") is True
        assert is_sort_format("created_at") is True

    def test_field_with_direction(self):
        assert is_sort_format("name asc") is True
        assert is_sort_format("name desc") is True

    def test_direction_case_insensitive(self):
        assert is_sort_format("name ASC") is True
        assert is_sort_format("name Desc") is True

    def test_unknown_direction(self):
        assert is_sort_format("name up") is False

    def test_too_many_tokens(self):
        assert is_sort_format("a b c") is False

    def test_double_space_is_invalid(self):
        assert is_sort_format("name  asc") is False

    def test_trailing_space_is_invalid(self):
        assert is_sort_format("name ") is False

    def test_invalid_characters(self):
        assert is_sort_format("name-asc") is False
        assert is_sort_format("price1 asc") is False

    def test_vertical_tab_is_invalid(self):
        assert is_sort_format("name\vasc") is False

    def test_tab_inside_single_token(self):
        assert is_sort_format("name\tasc") is True

    def test_blank_is_invalid(self):
        assert is_sort_format("") is False
        assert is_sort_format("   ") is False


class TestDefaultRules:
    def test_builtin_names(self):
        rules = get_all_default_rules()
        assert set(rules) == {
            "number",
            "comma_separated_numbers",
            "alphabet",
            "sort_format",
        }

    def test_names_map_to_predicates(self):
        rules = get_all_default_rules()
        assert rules["number"] is is_number
        assert rules["comma_separated_numbers"] is is_comma_separated_number
        assert rules["alphabet"] is is_alphabet
        assert rules["sort_format"] is is_sort_format

    def test_returns_fresh_dict(self):
        rules = get_all_default_rules()
        rules["number"] = lambda s: True
        assert get_all_default_rules()["number"] is is_number
