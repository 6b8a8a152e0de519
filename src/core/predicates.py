"""
String and keystroke predicates for the contact form.

These are pure functions with no Qt dependency, shared by the field
validators and the keypress filters.
"""

from __future__ import annotations

import re

# ASCII only; str.isdigit() would also accept other Unicode digits
_DIGITS_RE = re.compile(r"[0-9]+")

# Simple local-part@domain pattern. Not RFC 5322 complete.
_EMAIL_RE = re.compile(r"[a-zA-Z0-9_\-]+(\.[a-zA-Z0-9_\-]+)*@[a-zA-Z0-9_\-]+(\.[a-zA-Z0-9_\-]+)*")

DEFAULT_CODE_LENGTH = 4

# Whitespace and line terminators removed by ECMAScript String.prototype.trim.
# Differs from str.strip(), which also strips \x1c-\x1f and \x85 but keeps \ufeff.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_not_empty(text: str) -> bool:
    """
    Check that a string is not just whitespace.

    Args:
        text: The string to check

    Returns:
        True if text has at least one character outside _TRIM_CHARS
    """
    return len(text.strip(_TRIM_CHARS)) > 0


def is_all_digits(text: str) -> bool:
    """
    Check that a string contains only the characters 0-9.

    An empty string is not considered to be digits.
    """
    return _DIGITS_RE.fullmatch(text) is not None


def is_fixed_digit_code(text: str, length: int = DEFAULT_CODE_LENGTH) -> bool:
    """Return True if text is exactly ``length`` ASCII digits."""
    return len(text) == length and is_all_digits(text)


def is_length_in_range(text: str, min_length: int, max_length: int | None = None) -> bool:
    """
    Check that the length of a string lies within [min_length, max_length].

    Args:
        text: The string to check
        min_length: The minimum acceptable length
        max_length: The maximum acceptable length; defaults to min_length,
            which checks for an exact length

    Returns:
        True if text is an acceptable length
    """
    if max_length is None:
        max_length = min_length
    return min_length <= len(text) <= max_length


def is_valid_email(text: str) -> bool:
    """Return True if text matches the simple local-part@domain pattern."""
    return _EMAIL_RE.fullmatch(text) is not None


def is_digit_keystroke(code: int) -> bool:
    """
    Check if a key-press character code is a digit.

    Args:
        code: The character code of the key pressed

    Returns:
        True (accept) if the key is 0-9, False (reject) otherwise
    """
    return ord("0") <= code <= ord("9")


def is_uppercase_keystroke(code: int) -> bool:
    """Return True if the character code is an upper-case ASCII letter."""
    return ord("A") <= code <= ord("Z")


def starts_with(text: str, prefix: str) -> bool:
    """Return True if text starts with prefix."""
    return text[: len(prefix)] == prefix
