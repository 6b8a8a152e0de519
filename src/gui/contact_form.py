"""
Contact form widget.

This module contains the ContactForm widget, which lays out the contact
fields, validates them on submit and renders any error messages into the
``errors`` label.
"""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFormLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.config import DEFAULT_CONFIG
from core.config_manager import ConfigManager
from core.contact_validation import ContactField, ContactFormData, render_error_html, validate_fields
from core.error_handler import get_error_handler
from gui.utils.styling import StyleSheets, apply_error_state
from gui.validation.keypress_filter import KeystrokeFilter, digit_key_filter, uppercase_key_filter
from gui.validation.validators import DigitsValidator, create_validation_error

logger = logging.getLogger(__name__)


class ContactForm(QWidget):
    """
    Contact form with submit-time validation.

    Fields are located by object name (``fname``, ``lname``, ``email``,
    ``mobile``, ``msg``). Errors are rendered as HTML into the label named
    ``errors``. Call setup() to bind the submit handler and keystroke filters.
    """

    # Emitted with the ContactFormData when a submission passes validation
    submitted = Signal(object)
    # Emitted with the list of error messages when a submission fails validation
    validationFailed = Signal(list)

    def __init__(self, parent: QWidget | None = None, config_manager: ConfigManager | None = None) -> None:
        super().__init__(parent)
        self.config_manager = config_manager
        self.mobile_filter: KeystrokeFilter | None = None
        self.first_name_filter: KeystrokeFilter | None = None
        self.mobile_validator: DigitsValidator | None = None
        self._is_setup = False
        self._error_handler = get_error_handler()
        self._setup_ui()

    def _setup_ui(self) -> None:
        self.setObjectName("contactForm")
        self.setStyleSheet(
            StyleSheets.get_form_style() + StyleSheets.get_error_panel_style() + StyleSheets.get_final_message_style()
        )

        layout = QVBoxLayout(self)

        self.errors_label = QLabel()
        self.errors_label.setObjectName("errors")
        self.errors_label.setTextFormat(Qt.TextFormat.RichText)
        self.errors_label.setWordWrap(True)
        self.errors_label.hide()
        layout.addWidget(self.errors_label)

        self.final_message_label = QLabel()
        self.final_message_label.setObjectName("finalMsg")
        self.final_message_label.setWordWrap(True)
        self.final_message_label.hide()
        layout.addWidget(self.final_message_label)

        form_layout = QFormLayout()
        self._inputs: dict[ContactField, QLineEdit | QPlainTextEdit] = {}
        for field in ContactField:
            widget: QLineEdit | QPlainTextEdit
            if field is ContactField.MESSAGE:
                widget = QPlainTextEdit()
                widget.setTabChangesFocus(True)
            else:
                widget = QLineEdit()
            widget.setObjectName(field.object_name)
            widget.setAccessibleName(field.label)
            self._inputs[field] = widget
            form_layout.addRow(f"{field.label}:", widget)
        layout.addLayout(form_layout)

        self.submit_button = QPushButton("Send")
        self.submit_button.setObjectName("submitButton")
        layout.addWidget(self.submit_button, alignment=Qt.AlignmentFlag.AlignRight)

    def _option(self, key: str) -> Any:
        if self.config_manager is None:
            return DEFAULT_CONFIG[key]
        return self.config_manager.get(key)

    def setup(self) -> None:
        """
        Bind validation to the form.

        Connects the submit button (and Enter in the single-line fields) to
        validate_form, and installs the configured keystroke filters. A
        digits-only mobile field swallows Enter along with every other
        non-digit key, so it never submits the form.
        Calling setup more than once has no further effect.
        """
        if self._is_setup:
            return
        self._is_setup = True

        self.submit_button.clicked.connect(self.validate_form)
        digits_only = self._option("mobile_digits_only")
        for field, widget in self._inputs.items():
            if not isinstance(widget, QLineEdit):
                continue
            if field is ContactField.MOBILE and digits_only:
                continue
            widget.returnPressed.connect(self.validate_form)

        if digits_only:
            mobile = self.field_widget(ContactField.MOBILE)
            self.mobile_filter = digit_key_filter(self)
            mobile.installEventFilter(self.mobile_filter)
            # Pasted or dropped text bypasses the keystroke filter
            self.mobile_validator = DigitsValidator(self)
            mobile.setValidator(self.mobile_validator)

        if self._option("first_name_uppercase_only"):
            self.first_name_filter = uppercase_key_filter(self)
            self.field_widget(ContactField.FIRST_NAME).installEventFilter(self.first_name_filter)

        logger.debug("Contact form validation bound")

    def field_widget(self, field: ContactField) -> QLineEdit | QPlainTextEdit:
        """Return the input widget for a field."""
        return self._inputs[field]

    def field_values(self) -> ContactFormData:
        """Read the current value of every field."""
        values = {}
        for field, widget in self._inputs.items():
            if isinstance(widget, QPlainTextEdit):
                values[field.object_name] = widget.toPlainText()
            else:
                values[field.object_name] = widget.text()
        return ContactFormData.from_mapping(values)

    def clear_fields(self) -> None:
        """Clear every input field and its error state."""
        for widget in self._inputs.values():
            widget.clear()
            apply_error_state(widget, False)

    def validate_form(self) -> bool:
        """
        Validate the form entries before submission.

        Runs one validation pass over all fields. On failure the messages
        are rendered into the ``errors`` label and validationFailed is
        emitted; on success the error area is cleared and submitted is
        emitted.

        Returns:
            True if the form may be submitted, False otherwise
        """
        data = self.field_values()
        errors = validate_fields(data)

        failed_fields = {field for field, _message in errors}
        for field, widget in self._inputs.items():
            apply_error_state(widget, field in failed_fields)

        if not errors:
            self._show_success(data)
            return True

        messages = [message for _field, message in errors]
        self.final_message_label.hide()
        self.errors_label.setText(render_error_html(messages))
        self.errors_label.show()

        logger.info(f"Contact form rejected with {len(messages)} error(s)")
        for field, message in errors:
            self._error_handler.handle(create_validation_error(field.object_name, message))

        self.validationFailed.emit(messages)
        return False

    def _show_success(self, data: ContactFormData) -> None:
        self.errors_label.clear()
        self.errors_label.hide()

        logger.info("Contact form passed validation")
        self.submitted.emit(data)

        if self._option("clear_on_success"):
            self.clear_fields()

        if self._option("show_thank_you"):
            self.final_message_label.setText(str(self._option("thank_you_message")))
            self.final_message_label.show()
        else:
            self.final_message_label.hide()
