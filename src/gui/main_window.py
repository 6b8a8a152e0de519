"""
Main window for the contact form application.

This module contains the MainWindow class which hosts the contact form and
reports submission results in the status bar.
"""

import logging

from PySide6.QtWidgets import QMainWindow

from core.config_manager import ConfigManager
from core.contact_validation import ContactFormData
from gui.contact_form import ContactForm

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    """
    Main application window.

    Provides the contact form as its central widget.
    """

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        super().__init__()

        self.config_manager = config_manager or ConfigManager()

        self.setWindowTitle("Contact")
        self.resize(520, 480)

        self.contact_form = ContactForm(self, self.config_manager)
        self.setCentralWidget(self.contact_form)
        self.contact_form.setup()

        self.contact_form.submitted.connect(self.on_submitted)
        self.contact_form.validationFailed.connect(self.on_validation_failed)
        if self.contact_form.mobile_filter:
            self.contact_form.mobile_filter.keystrokeRejected.connect(self.on_mobile_keystroke_rejected)

        self.statusBar().showMessage("Ready")

    def on_submitted(self, data: ContactFormData) -> None:
        """Handle a contact form that passed validation."""
        # Server-side handling is not implemented; the message stays local
        self.statusBar().showMessage("Message ready to send", STATUS_TIMEOUT_MS)

    def on_validation_failed(self, messages: list[str]) -> None:
        count = len(messages)
        if count == 1:
            status = "1 field needs attention"
        else:
            status = f"{count} fields need attention"
        self.statusBar().showMessage(status, STATUS_TIMEOUT_MS)

    def on_mobile_keystroke_rejected(self, code: int) -> None:
        self.statusBar().showMessage("Mobile number accepts digits only", STATUS_TIMEOUT_MS)
