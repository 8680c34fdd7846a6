"""
Observable value bindings shared between a host UI and a validation controller.

A Binding is a mutable reference that both sides can read and write. Writes
that change the value emit valueChanged, so the controller can react to text
and trigger changes without knowing anything about the host widgets.
"""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QObject, Signal


class Binding(QObject):
    """
    Shared mutable reference to a single value.

    Signals:
        valueChanged(object): Emitted with the new value after each change
    """

    valueChanged = Signal(object)

    def __init__(self, value: Any = None, parent: QObject | None = None):
        super().__init__(parent)
        self._value = value

    @property
    def value(self) -> Any:
        """Current value."""
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self.set(value)

    def get(self) -> Any:
        """Return the current value."""
        return self._value

    def set(self, value: Any) -> bool:
        """
        Store a new value.

        Setting a value equal to the current one is a no-op and emits nothing.

        Args:
            value: The new value

        Returns:
            True if the value changed and valueChanged was emitted
        """
        if value == self._value:
            return False

        self._value = value
        self.valueChanged.emit(value)
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class ConstantBinding(Binding):
    """A binding whose value never changes; writes are ignored."""

    def set(self, value: Any) -> bool:
        return False


class ValidationState:
    """
    The bindings of one validated field.

    Attributes:
        text: Field text, written by the host
        is_valid: Result of the last evaluation, written by the controller
        trigger: On-demand validation request, set by the host and reset by the controller
    """

    def __init__(
        self,
        text: str = "",
        is_valid: bool = False,
        trigger: bool = False,
        parent: QObject | None = None,
    ):
        self.text = Binding(text, parent)
        self.is_valid = Binding(is_valid, parent)
        self.trigger = Binding(trigger, parent)

    def __repr__(self) -> str:
        return (
            f"ValidationState(text={self.text.value!r}, "
            f"is_valid={self.is_valid.value!r}, "
            f"trigger={self.trigger.value!r})"
        )
