"""
Shared styling utilities for the contact form GUI.

This module contains the colour palette and stylesheet definitions used by
the form, its error panel and the thank-you message.
"""

from typing import Any, Protocol


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...  # noqa: N802, N803
    def setProperty(self, name: str, value: Any) -> bool: ...  # noqa: N802
    def style(self) -> Any: ...


class AccessiblePalette:
    """Centralized colour palette with WCAG AA contrast."""

    ERROR_TEXT = "#721c24"  # Dark red for high contrast
    ERROR_BG = "#f8d7da"  # Light red background

    SUCCESS_TEXT = "#198754"  # Green

    BORDER_DEFAULT = "#dee2e6"
    BORDER_FOCUS = "#0d6efd"
    BORDER_ERROR = "#dc3545"
    BORDER_SUCCESS = "#198754"

    BACKGROUND_DEFAULT = "#ffffff"
    BACKGROUND_SECONDARY = "#f8f9fa"
    TEXT_PRIMARY = "#212529"

    BUTTON_PRIMARY_BG = "#0d6efd"
    BUTTON_PRIMARY_TEXT = "#ffffff"


class StyleSheets:
    """Collection of reusable stylesheet definitions using the accessible palette."""

    @staticmethod
    def get_error_panel_style() -> str:
        """Get stylesheet for the rendered error list."""
        return f"""
            QLabel#errors {{
                color: {AccessiblePalette.ERROR_TEXT};
                background-color: {AccessiblePalette.ERROR_BG};
                border: 1px solid {AccessiblePalette.BORDER_ERROR};
                border-radius: 4px;
                padding: 8px;
            }}
        """

    @staticmethod
    def get_final_message_style() -> str:
        """Get stylesheet for the thank-you message shown after a successful submit."""
        return f"""
            QLabel#finalMsg {{
                color: {AccessiblePalette.SUCCESS_TEXT};
                background-color: {AccessiblePalette.BACKGROUND_SECONDARY};
                border: 1px solid {AccessiblePalette.BORDER_SUCCESS};
                border-radius: 4px;
                padding: 8px;
                font-weight: bold;
            }}
        """

    @staticmethod
    def get_form_style() -> str:
        """Get stylesheet for the form inputs, including the error state."""
        return f"""
            QLineEdit, QPlainTextEdit {{
                border: 1px solid {AccessiblePalette.BORDER_DEFAULT};
                border-radius: 4px;
                padding: 4px;
                background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
                color: {AccessiblePalette.TEXT_PRIMARY};
            }}

            QLineEdit:focus, QPlainTextEdit:focus {{
                border: 2px solid {AccessiblePalette.BORDER_FOCUS};
            }}

            QLineEdit[hasError="true"], QPlainTextEdit[hasError="true"] {{
                border: 2px solid {AccessiblePalette.BORDER_ERROR};
            }}

            QPushButton#submitButton {{
                background-color: {AccessiblePalette.BUTTON_PRIMARY_BG};
                color: {AccessiblePalette.BUTTON_PRIMARY_TEXT};
                border-radius: 4px;
                padding: 8px 16px;
                font-weight: bold;
            }}
        """


def apply_error_state(widget: StyleableWidget, has_error: bool) -> None:
    """
    Mark a widget as having (or not having) an error and refresh its style.

    Args:
        widget: The input widget
        has_error: Whether the field failed validation
    """
    widget.setProperty("hasError", has_error)
    widget.style().unpolish(widget)
    widget.style().polish(widget)
