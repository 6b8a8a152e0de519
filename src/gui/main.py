"""
Main entry point for the contact form application.
"""

import sys

from PySide6.QtWidgets import QApplication

from core.config_manager import ConfigManager
from core.error_handler import init_logging, setup_error_handling
from gui.main_window import MainWindow


def main() -> int:
    """Main application entry point."""
    app = QApplication(sys.argv)

    config_manager = ConfigManager()
    init_logging(config_manager.get_log_level())
    error_handler = setup_error_handling()
    app.aboutToQuit.connect(error_handler.restore_hooks)

    window = MainWindow(config_manager)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
