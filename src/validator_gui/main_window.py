"""
Demo window for the field validator.

Shows an email field validated while typing and a phone number field
validated only when its Validate button is pressed. Rules and modes come
from the settings; every on-demand field gets its own Validate button.
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from validator_core.binding import ValidationState
from validator_core.config_manager import ConfigManager
from validator_core.rules import RULE_DESCRIPTIONS, ValidationMode
from validator_gui.line_edit import LineEditValidator, attach_line_edit
from validator_gui.utils.styling import get_feedback_label_style, get_input_validation_style

logger = logging.getLogger(__name__)


class FieldSection(QWidget):
    """A caption, a validated line edit and a feedback label."""

    def __init__(
        self,
        caption: str,
        placeholder: str,
        valid_message: str,
        invalid_message: str,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.valid_message = valid_message
        self.invalid_message = invalid_message
        self.state = ValidationState(parent=self)
        self.validate_button: QPushButton | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.caption_label = QLabel(caption)
        layout.addWidget(self.caption_label)

        self.line_edit = QLineEdit()
        self.line_edit.setPlaceholderText(placeholder)
        self.line_edit.setAccessibleName(caption)
        layout.addWidget(self.line_edit)

        self.feedback_label = QLabel()
        self.feedback_label.setAccessibleName(f"{caption} validation status")
        layout.addWidget(self.feedback_label)

        self.state.is_valid.valueChanged.connect(self._update_feedback)
        self._update_feedback(self.state.is_valid.value)

    def _update_feedback(self, is_valid: bool) -> None:
        self.feedback_label.setText(self.valid_message if is_valid else self.invalid_message)
        self.feedback_label.setStyleSheet(get_feedback_label_style(is_valid))
        self.line_edit.setStyleSheet(get_input_validation_style(is_valid))

    def add_validate_button(self) -> QPushButton:
        """Add a button below the field for on-demand validation."""
        self.validate_button = QPushButton("Validate")
        self.validate_button.setAccessibleName(f"Validate {self.caption_label.text().lower()}")
        self.layout().addWidget(self.validate_button)
        return self.validate_button


class MainWindow(QMainWindow):
    """Main demo window."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        super().__init__()
        self.config_manager = config_manager or ConfigManager()

        self.setWindowTitle("Field Validator")
        self.resize(480, 420)

        central = QWidget()
        self._layout = QVBoxLayout(central)
        self._layout.setSpacing(20)

        title = QLabel("Validation Example")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = title.font()
        font.setPointSize(24)
        font.setBold(True)
        title.setFont(font)
        self._layout.addWidget(title)

        self.email_section, self.email_validator = self._add_field(
            "Email", "Enter email", "valid email", "email_rule", "email_mode"
        )
        self.phone_section, self.phone_validator = self._add_field(
            "Phone", "Enter phone number", "valid phone number", "phone_rule", "phone_mode"
        )
        self._layout.addStretch()

        self.setCentralWidget(central)

    def _add_field(
        self, caption: str, placeholder: str, valid_message: str, rule_key: str, mode_key: str
    ) -> tuple[FieldSection, LineEditValidator]:
        rule = self.config_manager.get_rule(rule_key)
        mode = self.config_manager.get_mode(mode_key)
        logger.debug(f"{caption} field: {rule.value} in {mode.value} mode")

        section = FieldSection(caption, placeholder, valid_message, RULE_DESCRIPTIONS[rule])
        self._layout.addWidget(section)

        trigger = section.state.trigger if mode is ValidationMode.ON_DEMAND else None
        validator = attach_line_edit(section.line_edit, section.state.is_valid, rule, mode, trigger, section.state.text)

        if mode is ValidationMode.ON_DEMAND:
            section.add_validate_button().clicked.connect(validator.request_validation)

        return section, validator
