"""
Input validation for the contact form GUI.

This package provides the mobile field's QValidator and keystroke filters
that suppress invalid characters while typing.
"""

from .keypress_filter import KeystrokeFilter, digit_key_filter, uppercase_key_filter
from .validators import DigitsValidator, create_validation_error

__all__ = [
    "DigitsValidator",
    "KeystrokeFilter",
    "create_validation_error",
    "digit_key_filter",
    "uppercase_key_filter",
]
