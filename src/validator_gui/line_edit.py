"""
Attach a validation controller to a QLineEdit.

The widget's text is mirrored into a Binding in both directions, so typing
drives ON_CHANGE validation and programmatic writes to the binding show up
in the widget.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Slot
from PySide6.QtWidgets import QLineEdit

from validator_core.binding import Binding
from validator_core.controller import ValidationController
from validator_core.rules import ValidationMode, ValidationRule


class LineEditValidator(QObject):
    """
    Validation behavior composed onto a QLineEdit.

    Attributes:
        text: Binding mirroring the line edit's text
        is_valid: Host binding receiving the validation result
        trigger: Host trigger binding, or None outside ON_DEMAND mode
        controller: The ValidationController applying the rule
    """

    def __init__(
        self,
        line_edit: QLineEdit,
        is_valid: Binding,
        rule: ValidationRule,
        mode: ValidationMode,
        trigger: Binding | None = None,
        text: Binding | None = None,
    ):
        super().__init__(line_edit)
        self._line_edit = line_edit
        self.text = text if text is not None else Binding(line_edit.text(), self)
        self._sync_widget(self.text.value)
        self.is_valid = is_valid
        self.trigger = trigger

        line_edit.textChanged.connect(self.text.set)
        self.text.valueChanged.connect(self._sync_widget)

        self.controller = ValidationController(self)
        self.controller.attach(self.text, is_valid, rule, mode, trigger)

    @property
    def line_edit(self) -> QLineEdit:
        return self._line_edit

    def request_validation(self) -> None:
        """Raise the trigger, as a Validate button would in ON_DEMAND mode."""
        if self.trigger is not None:
            self.trigger.set(True)

    def detach(self) -> None:
        """Stop validating; the line edit keeps working as a plain field."""
        if not self.controller.is_attached:
            return

        self._line_edit.textChanged.disconnect(self.text.set)
        self.text.valueChanged.disconnect(self._sync_widget)
        self.controller.detach()

    @Slot(object)
    def _sync_widget(self, value: str) -> None:
        if self._line_edit.text() != value:
            self._line_edit.setText(value)


def attach_line_edit(
    line_edit: QLineEdit,
    is_valid: Binding,
    rule: ValidationRule,
    mode: ValidationMode,
    trigger: Binding | None = None,
    text: Binding | None = None,
) -> LineEditValidator:
    """
    Validate a line edit's text into a validity binding.

    Args:
        line_edit: The field to validate
        is_valid: Binding receiving the validation result
        rule: Rule to apply
        mode: ON_CHANGE to validate while typing, ON_DEMAND to wait for the trigger
        trigger: Binding set to True to request validation (ON_DEMAND only)
        text: Existing text binding to mirror; a new one is created if omitted

    Returns:
        The LineEditValidator, parented to the line edit
    """
    return LineEditValidator(line_edit, is_valid, rule, mode, trigger, text)
