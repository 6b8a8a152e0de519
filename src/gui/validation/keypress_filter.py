"""
Keystroke filtering for contact form fields.

A KeystrokeFilter is installed as an event filter on an input widget and
suppresses typed characters that fail a character-code predicate, so invalid
characters never reach the field.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtGui import QKeyEvent

from core.predicates import is_digit_keystroke, is_uppercase_keystroke

logger = logging.getLogger(__name__)

_SHORTCUT_MODIFIERS = Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.MetaModifier


class KeystrokeFilter(QObject):
    """
    Event filter that accepts or suppresses key presses by character code.

    Only key presses that produce a single printable character are checked.
    Editing keys (backspace, delete, arrows, tab) and Ctrl/Meta shortcuts
    always pass through.
    """

    keystrokeRejected = Signal(int)  # character code

    def __init__(self, accept: Callable[[int], bool], parent: QObject | None = None):
        super().__init__(parent)
        self._accept = accept

    def should_accept(self, event: QKeyEvent) -> bool:
        """
        Decide whether a key press may reach the widget.

        Args:
            event: The key press event

        Returns:
            True if the keystroke is allowed
        """
        text = event.text()
        if len(text) != 1 or not text.isprintable():
            return True
        if event.modifiers() & _SHORTCUT_MODIFIERS:
            return True
        return self._accept(ord(text))

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if event.type() == QEvent.Type.KeyPress and isinstance(event, QKeyEvent):
            if not self.should_accept(event):
                code = ord(event.text())
                logger.debug(f"Rejected keystroke {code!r} on '{watched.objectName()}'")
                self.keystrokeRejected.emit(code)
                return True
        return super().eventFilter(watched, event)


def digit_key_filter(parent: QObject | None = None) -> KeystrokeFilter:
    """Create a filter that only lets the digits 0-9 through."""
    return KeystrokeFilter(is_digit_keystroke, parent)


def uppercase_key_filter(parent: QObject | None = None) -> KeystrokeFilter:
    """Create a filter that only lets upper-case letters A-Z through."""
    return KeystrokeFilter(is_uppercase_keystroke, parent)
