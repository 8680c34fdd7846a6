"""
Shared styling for validated fields.

Colors meet WCAG AA contrast against the default white background.
"""


class AccessiblePalette:
    """Colors for validation feedback."""

    BORDER_DEFAULT = "#dee2e6"
    BORDER_ERROR = "#dc3545"
    BORDER_SUCCESS = "#198754"

    BACKGROUND_DEFAULT = "#ffffff"
    TEXT_PRIMARY = "#212529"
    TEXT_VALID = "#198754"
    TEXT_INVALID = "#dc3545"


def get_input_validation_style(is_valid: bool) -> str:
    """Get the QLineEdit stylesheet for a validity state."""
    border = AccessiblePalette.BORDER_SUCCESS if is_valid else AccessiblePalette.BORDER_ERROR
    return f"""
        QLineEdit {{
            border: 1px solid {border};
            border-radius: 8px;
            padding: 0 12px;
            min-height: 50px;
            background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
            color: {AccessiblePalette.TEXT_PRIMARY};
        }}
    """


def get_feedback_label_style(is_valid: bool) -> str:
    """Get the stylesheet for the label under a validated field."""
    color = AccessiblePalette.TEXT_VALID if is_valid else AccessiblePalette.TEXT_INVALID
    return f"QLabel {{ color: {color}; padding-top: 10px; }}"
