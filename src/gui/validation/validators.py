"""
Custom validators for contact form input fields.

This module provides the digits-only QValidator for the mobile field and a
helper for turning validation messages into
structured errors for logging.
"""

from __future__ import annotations

import re
from typing import Any

from PySide6.QtCore import QRegularExpression
from PySide6.QtGui import QRegularExpressionValidator, QValidator
from PySide6.QtWidgets import QWidget

from core.errors import ErrorCode, ValidationError


class DigitsValidator(QRegularExpressionValidator):
    """
    Validator for fields that accept only the characters 0-9.

    Blank input is Intermediate so the field can be cleared while editing.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(QRegularExpression(r"^[0-9]*$"), parent)

    def validate(self, input_text: str, pos: int) -> tuple[QValidator.State, str, int]:
        """Validate digit input."""
        result = super().validate(input_text, pos)
        state = QValidator.State(result[0])  # type: ignore[index]

        if state == QValidator.State.Acceptable and not input_text:
            return QValidator.State.Intermediate, input_text, pos

        return state, input_text, pos

    def fixup(self, input_text: str) -> str:
        """Drop every character that is not an ASCII digit."""
        return re.sub(r"[^0-9]", "", input_text)


def create_validation_error(field: str, message: str, value: Any = None) -> ValidationError:
    """
    Create a ValidationError for logging purposes.

    Args:
        field: Field name that failed validation
        message: Validation error message
        value: The invalid value

    Returns:
        ValidationError instance
    """
    code = ErrorCode.INVALID_INPUT
    lowered = message.lower()

    if "please enter" in lowered or "required" in lowered:
        code = ErrorCode.REQUIRED_FIELD_MISSING
    elif "invalid" in lowered or "format" in lowered or "pattern" in lowered:
        code = ErrorCode.INVALID_FORMAT
    elif "range" in lowered or "length" in lowered:
        code = ErrorCode.VALUE_OUT_OF_RANGE

    return ValidationError(
        code=code,
        user_message=message,
        field=field,
        technical_message=f"Validation failed for field '{field}': {message}",
        context={"value": value} if value is not None else {},
    )
