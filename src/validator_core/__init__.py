"""
Rule-based validation for text-entry fields.

Bind a field's text to a validity flag with one of a fixed set of rules,
evaluated on every change or only when a trigger flag is raised.
"""

from .binding import Binding, ConstantBinding, ValidationState
from .controller import ValidationController, attach
from .rules import RULE_DESCRIPTIONS, ValidationMode, ValidationRule, evaluate

__all__ = [
    "RULE_DESCRIPTIONS",
    "Binding",
    "ConstantBinding",
    "ValidationController",
    "ValidationMode",
    "ValidationRule",
    "ValidationState",
    "attach",
    "evaluate",
]
