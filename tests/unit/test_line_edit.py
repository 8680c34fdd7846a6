"""
Tests for attaching validation to a QLineEdit.
"""

import warnings

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLineEdit

from validator_core.binding import Binding
from validator_core.rules import ValidationMode, ValidationRule
from validator_gui.line_edit import LineEditValidator, attach_line_edit


class TestLineEditValidator:
    """Test the LineEditValidator composition."""

    def setup_method(self):
        """Set up test fixtures."""
        self.line_edit = QLineEdit()
        self.is_valid = Binding(False)
        self.trigger = Binding(False)

    def test_attach_returns_validator_parented_to_widget(self):
        validator = attach_line_edit(self.line_edit, self.is_valid, ValidationRule.EMAIL, ValidationMode.ON_CHANGE)

        assert isinstance(validator, LineEditValidator)
        assert validator.parent() is self.line_edit
        assert validator.line_edit is self.line_edit
        assert validator.controller.is_attached

    def test_typing_validates_on_change(self, qtbot):
        qtbot.addWidget(self.line_edit)
        self.line_edit.show()
        attach_line_edit(self.line_edit, self.is_valid, ValidationRule.EMAIL, ValidationMode.ON_CHANGE)

        qtbot.keyClicks(self.line_edit, "a@b.co")

        assert self.is_valid.value is True

        qtbot.keyClick(self.line_edit, Qt.Key.Key_Backspace)
        qtbot.keyClick(self.line_edit, Qt.Key.Key_Backspace)
        qtbot.keyClick(self.line_edit, Qt.Key.Key_Backspace)

        assert self.line_edit.text() == "a@b"
        assert self.is_valid.value is False

    def test_set_text_mirrors_into_binding(self):
        validator = attach_line_edit(self.line_edit, self.is_valid, ValidationRule.NUMERIC, ValidationMode.ON_CHANGE)

        self.line_edit.setText("3.14")

        assert validator.text.value == "3.14"
        assert self.is_valid.value is True

    def test_binding_write_updates_widget(self):
        validator = attach_line_edit(self.line_edit, self.is_valid, ValidationRule.NUMERIC, ValidationMode.ON_CHANGE)

        validator.text.set("42")

        assert self.line_edit.text() == "42"
        assert self.is_valid.value is True

    def test_existing_text_binding_seeds_widget(self):
        text = Binding("preset")

        validator = attach_line_edit(
            self.line_edit, self.is_valid, ValidationRule.EMPTY, ValidationMode.ON_CHANGE, text=text
        )

        assert validator.text is text
        assert self.line_edit.text() == "preset"

    def test_on_demand_waits_for_request(self, qtbot):
        validator = attach_line_edit(
            self.line_edit, self.is_valid, ValidationRule.PHONE_NUMBER, ValidationMode.ON_DEMAND, self.trigger
        )

        self.line_edit.setText("1234567890")
        assert self.is_valid.value is False

        validator.request_validation()

        assert self.is_valid.value is True
        qtbot.waitUntil(lambda: self.trigger.value is False, timeout=1000)

    def test_request_validation_without_trigger(self):
        validator = attach_line_edit(self.line_edit, self.is_valid, ValidationRule.EMPTY, ValidationMode.ON_CHANGE)
        # Should not raise
        validator.request_validation()

    def test_detach(self):
        validator = attach_line_edit(self.line_edit, self.is_valid, ValidationRule.EMPTY, ValidationMode.ON_CHANGE)
        validator.detach()

        self.line_edit.setText("abc")

        assert validator.text.value == ""
        assert self.is_valid.value is False
        assert not validator.controller.is_attached

    def test_detach_twice(self):
        validator = attach_line_edit(self.line_edit, self.is_valid, ValidationRule.EMPTY, ValidationMode.ON_CHANGE)
        validator.detach()

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validator.detach()

        assert not validator.controller.is_attached
