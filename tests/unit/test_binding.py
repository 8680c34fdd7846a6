"""
Tests for observable bindings and the field state triple.
"""

from validator_core.binding import Binding, ConstantBinding, ValidationState


class TestBinding:
    """Test the Binding class."""

    def test_initial_value(self):
        binding = Binding("hello")
        assert binding.value == "hello"
        assert binding.get() == "hello"

    def test_set_emits_on_change(self, qtbot):
        binding = Binding("")

        with qtbot.waitSignal(binding.valueChanged, timeout=1000) as blocker:
            changed = binding.set("abc")

        assert changed is True
        assert blocker.args == ["abc"]
        assert binding.value == "abc"

    def test_set_same_value_is_silent(self, qtbot):
        binding = Binding("abc")

        with qtbot.assertNotEmitted(binding.valueChanged):
            changed = binding.set("abc")

        assert changed is False

    def test_value_property_setter(self):
        binding = Binding(False)
        received = []
        binding.valueChanged.connect(lambda value: received.append(value))

        binding.value = True

        assert binding.value is True
        assert received == [True]

    def test_repr(self):
        assert repr(Binding("x")) == "Binding('x')"


class TestConstantBinding:
    """Test the read-only binding used as the default trigger."""

    def test_writes_ignored(self, qtbot):
        binding = ConstantBinding(False)

        with qtbot.assertNotEmitted(binding.valueChanged):
            changed = binding.set(True)

        assert changed is False
        assert binding.value is False


class TestValidationState:
    """Test the ValidationState triple."""

    def test_defaults(self, state):
        assert state.text.value == ""
        assert state.is_valid.value is False
        assert state.trigger.value is False

    def test_custom_initial_values(self):
        state = ValidationState(text="abc", is_valid=True, trigger=False)
        assert state.text.value == "abc"
        assert state.is_valid.value is True

    def test_bindings_are_independent(self, state):
        state.text.set("abc")
        assert state.is_valid.value is False
        assert state.trigger.value is False

    def test_repr(self, state):
        assert repr(state) == "ValidationState(text='', is_valid=False, trigger=False)"
