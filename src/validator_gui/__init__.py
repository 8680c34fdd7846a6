"""
Qt widget integration for the field validator.

Attach rule-based validation to QLineEdit fields, or use a rule as a
QValidator.
"""

from .line_edit import LineEditValidator, attach_line_edit
from .validators import RuleValidator

__all__ = [
    "LineEditValidator",
    "RuleValidator",
    "attach_line_edit",
]
