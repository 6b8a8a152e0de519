"""
Tests for the contact form predicates.

Tests cover:
- Non-empty, digit, fixed code and length checks
- Email pattern matching
- Keystroke character code checks
"""

import pytest

from core.predicates import (
    is_all_digits,
    is_digit_keystroke,
    is_fixed_digit_code,
    is_length_in_range,
    is_not_empty,
    is_uppercase_keystroke,
    is_valid_email,
    starts_with,
)


class TestIsNotEmpty:
    """Test the is_not_empty predicate."""

    @pytest.mark.parametrize("text", ["", " ", "   ", "\t", "\n", " \t\r\n "])
    def test_whitespace_only_is_empty(self, text):
        assert is_not_empty(text) is False

    @pytest.mark.parametrize("text", ["a", " a ", "\tx\n", "0", "  hello world  "])
    def test_non_whitespace_is_not_empty(self, text):
        assert is_not_empty(text) is True

    @pytest.mark.parametrize("text", ["\ufeff", "\u00a0", "\u3000", " \u2028\ufeff "])
    def test_unicode_whitespace_is_empty(self, text):
        assert is_not_empty(text) is False

    @pytest.mark.parametrize("text", ["\x1c", "\x1f", "\x85", "\u200b"])
    def test_separator_controls_are_not_whitespace(self, text):
        """Only the characters JavaScript trim() removes count as blank."""
        assert is_not_empty(text) is True


class TestIsAllDigits:
    """Test the is_all_digits predicate."""

    @pytest.mark.parametrize("text", ["0", "7", "0123456789", "0000"])
    def test_digits_accepted(self, text):
        assert is_all_digits(text) is True

    @pytest.mark.parametrize("text", ["", " ", "12a", "a12", "1 2", "-1", "1.5", "+64", "12\n"])
    def test_non_digits_rejected(self, text):
        assert is_all_digits(text) is False

    def test_non_ascii_digits_rejected(self):
        """Arabic-Indic and full-width digits are not 0-9."""
        assert is_all_digits("١٢") is False
        assert is_all_digits("１２") is False


class TestIsFixedDigitCode:
    """Test the is_fixed_digit_code predicate."""

    def test_four_digits(self):
        assert is_fixed_digit_code("1234") is True

    @pytest.mark.parametrize("text", ["123", "12345", "", "12a4", " 1234"])
    def test_wrong_length_or_characters(self, text):
        assert is_fixed_digit_code(text) is False

    def test_custom_length(self):
        assert is_fixed_digit_code("123456", 6) is True
        assert is_fixed_digit_code("1234", 6) is False


class TestIsLengthInRange:
    """Test the is_length_in_range predicate."""

    def test_within_range(self):
        assert is_length_in_range("abc", 2, 5) is True

    def test_below_range(self):
        assert is_length_in_range("a", 2, 5) is False

    def test_above_range(self):
        assert is_length_in_range("abcdef", 2, 5) is False

    def test_bounds_inclusive(self):
        assert is_length_in_range("ab", 2, 5) is True
        assert is_length_in_range("abcde", 2, 5) is True

    def test_max_defaults_to_min(self):
        assert is_length_in_range("ab", 2) is True
        assert is_length_in_range("abc", 2) is False
        assert is_length_in_range("a", 2) is False


class TestIsValidEmail:
    """Test the is_valid_email predicate."""

    @pytest.mark.parametrize(
        "email",
        [
            "a.b@example.com",
            "user@example.com",
            "first_last-1@mail.example.co.nz",
            "x@localhost",
            "UPPER@Example.COM",
        ],
    )
    def test_valid_emails(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "not-an-email",
            "a@b@c.com",
            "",
            "@example.com",
            "user@",
            "user.@example.com",
            "user@example..com",
            "user name@example.com",
            "user+tag@example.com",
            " user@example.com",
        ],
    )
    def test_invalid_emails(self, email):
        assert is_valid_email(email) is False


class TestKeystrokes:
    """Test keystroke character code predicates."""

    def test_digit_keystrokes(self):
        for char in "0123456789":
            assert is_digit_keystroke(ord(char)) is True

    @pytest.mark.parametrize("char", ["a", "Z", " ", "/", ":", "-", "+"])
    def test_non_digit_keystrokes(self, char):
        assert is_digit_keystroke(ord(char)) is False

    def test_uppercase_keystrokes(self):
        assert is_uppercase_keystroke(ord("A")) is True
        assert is_uppercase_keystroke(ord("Z")) is True
        assert is_uppercase_keystroke(ord("a")) is False
        assert is_uppercase_keystroke(ord("@")) is False
        assert is_uppercase_keystroke(ord("[")) is False


def test_starts_with():
    assert starts_with("+6421555", "+64") is True
    assert starts_with("021555", "+64") is False
    assert starts_with("abc", "") is True
    assert starts_with("ab", "abc") is False
