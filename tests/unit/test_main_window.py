"""
Tests for the MainWindow class.
"""

from unittest.mock import Mock

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from core.config import DEFAULT_CONFIG
from core.contact_validation import ContactField
from gui.contact_form import ContactForm
from gui.main_window import MainWindow


@pytest.fixture
def window(qtbot):
    config_manager = Mock()
    config_manager.get.side_effect = lambda key, default=None: DEFAULT_CONFIG[key]
    main_window = MainWindow(config_manager)
    qtbot.addWidget(main_window)
    main_window.show()
    return main_window


class TestMainWindow:
    """Test MainWindow setup and status reporting."""

    def test_window_properties(self, window):
        assert window.windowTitle() == "Contact"
        assert isinstance(window.contact_form, ContactForm)
        assert window.centralWidget() is window.contact_form
        assert window.statusBar().currentMessage() == "Ready"

    def test_failed_submit_updates_status(self, window, qtbot):
        qtbot.mouseClick(window.contact_form.submit_button, Qt.MouseButton.LeftButton)

        assert window.statusBar().currentMessage() == "4 fields need attention"

    def test_single_failure_status(self, window):
        form = window.contact_form
        form.field_widget(ContactField.FIRST_NAME).setText("Ada")
        form.field_widget(ContactField.EMAIL).setText("ada@example.com")
        form.field_widget(ContactField.MOBILE).setText("021")

        form.validate_form()

        assert window.statusBar().currentMessage() == "1 field needs attention"

    def test_successful_submit_updates_status(self, window):
        form = window.contact_form
        form.field_widget(ContactField.FIRST_NAME).setText("Ada")
        form.field_widget(ContactField.EMAIL).setText("ada@example.com")
        form.field_widget(ContactField.MOBILE).setText("021")
        form.field_widget(ContactField.MESSAGE).setPlainText("Hi")

        form.validate_form()

        assert window.statusBar().currentMessage() == "Message ready to send"

    def test_rejected_mobile_keystroke_updates_status(self, window):
        QTest.keyClicks(window.contact_form.field_widget(ContactField.MOBILE), "x")

        assert window.statusBar().currentMessage() == "Mobile number accepts digits only"
