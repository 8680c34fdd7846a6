"""
Validation rules and modes for text-entry fields.

This module defines the closed set of rules a field can be checked against,
the modes that decide when a check runs, and the pure evaluator that maps
a text value and a rule to a validity flag.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import TypeVar

from .errors import ConfigError, ErrorCode

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
ALPHANUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]*")
PHONE_NUMBER_PATTERN = re.compile(r"[0-9]{10}")

_E = TypeVar("_E", bound=Enum)

# Decimal or exponential literal, no whitespace, no digit grouping
NUMERIC_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


class ValidationRule(Enum):
    """Named checks that classify a text value as valid or invalid."""

    EMPTY = "empty"
    EMAIL = "email"
    ALPHANUMERIC = "alphanumeric"
    NUMERIC = "numeric"
    PHONE_NUMBER = "phone_number"

    @classmethod
    def parse(cls, name: str | ValidationRule) -> ValidationRule:
        """
        Resolve a rule from its name.

        Args:
            name: Rule value or member name, case-insensitive

        Returns:
            The matching ValidationRule

        Raises:
            ConfigError: If the name does not match any rule
        """
        return _parse_member(cls, name)


class ValidationMode(Enum):
    """When a field's rule is (re-)applied."""

    ON_CHANGE = "on_change"
    ON_DEMAND = "on_demand"

    @classmethod
    def parse(cls, name: str | ValidationMode) -> ValidationMode:
        """Resolve a mode from its name (see ValidationRule.parse)."""
        return _parse_member(cls, name)


RULE_DESCRIPTIONS: dict[ValidationRule, str] = {
    ValidationRule.EMPTY: "Value must not be empty",
    ValidationRule.EMAIL: "Value must be an email address",
    ValidationRule.ALPHANUMERIC: "Value may contain only letters and digits",
    ValidationRule.NUMERIC: "Value must be a number",
    ValidationRule.PHONE_NUMBER: "Value must be exactly 10 digits",
}


def _parse_member(enum_cls: type[_E], name: object) -> _E:
    if isinstance(name, enum_cls):
        return name

    key = str(name).strip().lower().replace("-", "_")
    for member in enum_cls:
        if key in (member.value, member.name.lower()):
            return member

    valid_names = ", ".join(member.value for member in enum_cls)
    raise ConfigError(
        code=ErrorCode.CONFIG_INVALID,
        user_message=f"Unknown {enum_cls.__name__} '{name}'",
        technical_message=f"Expected one of: {valid_names}",
        context={"value": name},
    )


def is_numeric(text: str) -> bool:
    """Return True if text is a decimal or exponential literal with a finite value."""
    if not NUMERIC_PATTERN.fullmatch(text):
        return False
    return math.isfinite(float(text))


def evaluate(text: str, rule: ValidationRule) -> bool:
    """
    Check a text value against a validation rule.

    Pure and total: every string yields a boolean, and repeated calls with the
    same arguments return the same result.

    Args:
        text: Raw field text
        rule: Rule to apply

    Returns:
        True if the text satisfies the rule
    """
    if rule is ValidationRule.EMPTY:
        # Passes when the field is NOT empty
        return len(text) > 0
    if rule is ValidationRule.EMAIL:
        return EMAIL_PATTERN.fullmatch(text) is not None
    if rule is ValidationRule.ALPHANUMERIC:
        return ALPHANUMERIC_PATTERN.fullmatch(text) is not None
    if rule is ValidationRule.NUMERIC:
        return is_numeric(text)
    if rule is ValidationRule.PHONE_NUMBER:
        return PHONE_NUMBER_PATTERN.fullmatch(text) is not None

    raise AssertionError(f"Unhandled validation rule: {rule!r}")
