"""
Validation controller binding a field's text to its validity flag.

The controller owns the triggering policy. In ON_CHANGE mode every text
change is evaluated immediately. In ON_DEMAND mode the text is only evaluated
when the host sets the trigger binding to True; the controller then resets
the trigger on the next turn of the Qt event loop so it can fire again.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Slot

from .binding import Binding, ConstantBinding
from .rules import ValidationMode, ValidationRule, evaluate

logger = logging.getLogger(__name__)


class ValidationController(QObject):
    """
    Applies one validation rule to a host-owned text binding.

    The host keeps ownership of the text, validity and trigger bindings. The
    controller only reads the text, writes the validity flag and, in
    ON_DEMAND mode, resets the trigger after each requested evaluation.
    """

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._text: Binding | None = None
        self._is_valid: Binding | None = None
        self._trigger: Binding | None = None
        self._rule: ValidationRule | None = None
        self._mode: ValidationMode | None = None

        # Shared stand-in used whenever the host passes no trigger
        self._default_trigger = ConstantBinding(False, self)

        # Deferred trigger reset, armed after each on-demand evaluation
        self._reset_timer = QTimer(self)
        self._reset_timer.setSingleShot(True)
        self._reset_timer.setInterval(0)
        self._reset_timer.timeout.connect(self._reset_trigger)

    @property
    def rule(self) -> ValidationRule | None:
        return self._rule

    @property
    def mode(self) -> ValidationMode | None:
        return self._mode

    @property
    def is_attached(self) -> bool:
        return self._text is not None

    @property
    def reset_pending(self) -> bool:
        """True while a trigger reset is scheduled but has not run yet."""
        return self._reset_timer.isActive()

    def attach(
        self,
        text: Binding,
        is_valid: Binding,
        rule: ValidationRule,
        mode: ValidationMode,
        trigger: Binding | None = None,
    ) -> None:
        """
        Bind the controller to a field's bindings.

        No evaluation happens here; is_valid keeps its current value until
        the first text change (ON_CHANGE) or trigger activation (ON_DEMAND).
        An ON_DEMAND trigger that is already True is lowered on the next turn
        of the event loop without evaluating.

        Args:
            text: Binding holding the field text
            is_valid: Binding receiving the validation result
            rule: Rule to apply
            mode: When to apply the rule
            trigger: Binding the host sets to True to request validation;
                only used in ON_DEMAND mode, defaults to a constant False
        """
        if self.is_attached:
            self.detach()

        if trigger is None:
            trigger = self._default_trigger
            if mode is ValidationMode.ON_DEMAND:
                logger.warning(f"On-demand {rule.value} validator attached without a trigger; it will never fire")

        self._text = text
        self._is_valid = is_valid
        self._trigger = trigger
        self._rule = rule
        self._mode = mode

        text.valueChanged.connect(self.on_text_changed)
        trigger.valueChanged.connect(self.on_trigger_changed)

        # Binding.set only emits on change, so a raised trigger must come down first
        if mode is ValidationMode.ON_DEMAND and trigger.get():
            self._reset_timer.start()

        logger.debug(f"Attached {rule.value} validator in {mode.value} mode")

    def detach(self) -> None:
        """Disconnect from the bound values, running any pending trigger reset first."""
        if not self.is_attached:
            return

        assert self._text is not None and self._trigger is not None
        self._text.valueChanged.disconnect(self.on_text_changed)
        self._trigger.valueChanged.disconnect(self.on_trigger_changed)

        if self._reset_timer.isActive():
            self._reset_timer.stop()
            self._trigger.set(False)

        self._text = None
        self._is_valid = None
        self._trigger = None
        logger.debug("Detached validator")

    def validate(self) -> bool:
        """
        Evaluate the current text and publish the result.

        Returns:
            The new validity; False if the controller is not attached
        """
        if self._text is None or self._is_valid is None or self._rule is None:
            return False

        result = evaluate(self._text.get(), self._rule)
        self._is_valid.set(result)
        return result

    @Slot()
    def on_text_changed(self) -> None:
        """Hook for text changes; evaluates in ON_CHANGE mode only."""
        if self._mode is not ValidationMode.ON_CHANGE:
            return

        self.validate()

    @Slot()
    def on_trigger_changed(self) -> None:
        """Hook for trigger changes; evaluates when an ON_DEMAND trigger turns True."""
        if self._mode is not ValidationMode.ON_DEMAND or self._trigger is None:
            return
        if not self._trigger.get():
            return

        result = self.validate()
        logger.debug(f"On-demand validation: valid={result}")

        # The host may still be dispatching the change that set the trigger
        self._reset_timer.start()

    @Slot()
    def _reset_trigger(self) -> None:
        if self._trigger is not None:
            self._trigger.set(False)


def attach(
    text: Binding,
    is_valid: Binding,
    rule: ValidationRule,
    mode: ValidationMode,
    trigger: Binding | None = None,
    parent: QObject | None = None,
) -> ValidationController:
    """
    Create a ValidationController and attach it to the given bindings.

    The controller stops validating once it is deleted, so keep a reference
    to it or give it a parent.
    """
    controller = ValidationController(parent)
    controller.attach(text, is_valid, rule, mode, trigger)
    return controller
