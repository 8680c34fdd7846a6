"""
GUI-specific utilities for the field validator.
"""

from .styling import AccessiblePalette, get_feedback_label_style, get_input_validation_style

__all__ = [
    "AccessiblePalette",
    "get_feedback_label_style",
    "get_input_validation_style",
]
