"""
Main entry point for the field validator demo.
"""

import sys

from PySide6.QtWidgets import QApplication

from validator_core.config_manager import ConfigManager
from validator_core.error_handler import init_logging
from validator_gui.main_window import MainWindow


def main() -> int:
    """Main application entry point."""
    app = QApplication(sys.argv)

    config_manager = ConfigManager()
    init_logging(config_manager.get_log_level())

    window = MainWindow(config_manager)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
