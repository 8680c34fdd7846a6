"""
Shared fixtures for field validator tests.
"""

import os

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtCore import QStandardPaths  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from validator_core.binding import ValidationState  # noqa: E402

# Keep settings and log files out of the user's real directories
QStandardPaths.setTestModeEnabled(True)


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Create QApplication for all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def state():
    """Fresh field state: empty text, invalid, trigger lowered."""
    return ValidationState()
