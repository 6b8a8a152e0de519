"""
GUI-specific utilities for the contact form application.
"""

from .styling import AccessiblePalette, StyleSheets, apply_error_state

__all__ = [
    "AccessiblePalette",
    "StyleSheets",
    "apply_error_state",
]
