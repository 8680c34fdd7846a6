"""
QValidator adapter for validation rules.

Lets a rule drive Qt's built-in validator machinery (QLineEdit.setValidator,
hasAcceptableInput, editingFinished) in addition to the binding-based
controller.
"""

from __future__ import annotations

from PySide6.QtGui import QValidator
from PySide6.QtWidgets import QWidget

from validator_core.rules import RULE_DESCRIPTIONS, ValidationRule, evaluate


class RuleValidator(QValidator):
    """
    QValidator that accepts input satisfying a ValidationRule.

    Input that fails the rule is reported as Intermediate rather than Invalid,
    so the user can keep typing towards a valid value.
    """

    def __init__(self, rule: ValidationRule, parent: QWidget | None = None):
        super().__init__(parent)
        self.rule = rule

    @property
    def description(self) -> str:
        return RULE_DESCRIPTIONS[self.rule]

    def validate(self, input_text: str, pos: int) -> tuple[QValidator.State, str, int]:
        """Validate input against the rule."""
        if evaluate(input_text, self.rule):
            return QValidator.State.Acceptable, input_text, pos
        return QValidator.State.Intermediate, input_text, pos
