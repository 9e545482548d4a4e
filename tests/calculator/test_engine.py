"""
Unit tests for the calculator engine.

Run (with venv activated):
  python -m unittest tests.calculator.test_engine -v
  pytest tests/calculator/ -v
"""
import math
import unittest

from calcapp.projects.calculator.core.engine import (
    INITIAL_STATE,
    CalculatorState,
    InvalidInput,
    Operator,
    apply,
    backspace,
    clear,
    input_decimal,
    input_digit,
    perform,
    press_equals,
    press_operator,
)


def _run(*inputs, state=INITIAL_STATE):
    """Feed inputs like '1', '.', '+', '=', 'C', 'BS' through perform."""
    for item in inputs:
        if item in "0123456789" and len(item) == 1:
            state = perform(state, "digit", item)
        elif item == ".":
            state = perform(state, "decimal")
        elif item == "=":
            state = perform(state, "equals")
        elif item == "C":
            state = perform(state, "clear")
        elif item == "BS":
            state = perform(state, "backspace")
        else:
            state = perform(state, "operator", item)
    return state


class TestApply(unittest.TestCase):
    """Pure arithmetic."""

    def test_basic_operations(self):
        self.assertEqual(apply(Operator.ADD, 2, 3), 5)
        self.assertEqual(apply(Operator.SUBTRACT, 2, 3), -1)
        self.assertEqual(apply(Operator.MULTIPLY, 2, 3), 6)
        self.assertEqual(apply(Operator.DIVIDE, 3, 2), 1.5)

    def test_accepts_symbols(self):
        self.assertEqual(apply("×", 4, 5), 20)
        self.assertEqual(apply("÷", 9, 3), 3)

    def test_divide_by_zero_is_zero(self):
        for a in (0, 6, -2.5, 1e300):
            self.assertEqual(apply(Operator.DIVIDE, a, 0), 0)

    def test_unknown_operator_returns_right_operand(self):
        self.assertEqual(apply("%", 10, 3), 3)
        self.assertEqual(apply(None, 10, 3), 3)


class TestDigitEntry(unittest.TestCase):

    def test_digits_concatenate(self):
        self.assertEqual(_run("1", "2", "3").display, "123")

    def test_leading_zero_collapses(self):
        self.assertEqual(_run("0", "5").display, "5")
        self.assertEqual(_run("0", "0").display, "0")

    def test_digit_after_operator_starts_new_number(self):
        state = _run("1", "2", "+", "3")
        self.assertEqual(state.display, "3")
        self.assertFalse(state.awaiting_new_entry)
        self.assertEqual(state.pending_value, 12)

    def test_input_digit_returns_new_value(self):
        state = CalculatorState(display="4")
        next_state = input_digit(state, "2")
        self.assertEqual(state.display, "4")
        self.assertEqual(next_state.display, "42")


class TestDecimal(unittest.TestCase):

    def test_decimal_appends_once(self):
        self.assertEqual(_run("1", ".", ".").display, "1.")
        self.assertEqual(_run("1", ".", "5", ".").display, "1.5")

    def test_decimal_from_initial_state(self):
        self.assertEqual(_run(".").display, "0.")

    def test_decimal_after_operator_starts_fresh(self):
        state = _run("7", "+", ".")
        self.assertEqual(state.display, "0.")
        self.assertFalse(state.awaiting_new_entry)

    def test_decimal_noop_returns_same_state(self):
        state = CalculatorState(display="2.5")
        self.assertIs(input_decimal(state), state)


class TestOperators(unittest.TestCase):

    def test_first_operator_captures_display(self):
        state = _run("8", "×")
        self.assertEqual(state.pending_value, 8)
        self.assertEqual(state.pending_operator, Operator.MULTIPLY)
        self.assertTrue(state.awaiting_new_entry)
        self.assertEqual(state.display, "8")

    def test_chained_operations_show_running_total(self):
        state = _run("3", "+", "4", "+")
        self.assertEqual(state.display, "7")
        self.assertEqual(state.pending_value, 7)
        state = _run("5", "=", state=state)
        self.assertEqual(state.display, "12")

    def test_chain_switches_operator(self):
        state = _run("9", "-", "4", "×", "3", "=")
        self.assertEqual(state.display, "15")

    def test_repeated_operator_reapplies_display(self):
        state = _run("3", "+", "+")
        self.assertEqual(state.display, "6")
        state = _run("+", state=state)
        self.assertEqual(state.display, "12")

    def test_fractional_result(self):
        self.assertEqual(_run("1", "÷", "4", "=").display, "0.25")
        self.assertEqual(_run(".", "1", "+", ".", "2", "=").display, "0.30000000000000004")

    def test_nan_pending_value_counts_as_zero_when_chaining(self):
        state = CalculatorState(
            display="5",
            pending_value=math.nan,
            pending_operator=Operator.ADD,
        )
        self.assertEqual(press_operator(state, Operator.ADD).display, "5")


class TestEquals(unittest.TestCase):

    def test_equals_computes_and_clears_pending(self):
        state = _run("6", "×", "7", "=")
        self.assertEqual(state.display, "42")
        self.assertIsNone(state.pending_value)
        self.assertIsNone(state.pending_operator)
        self.assertTrue(state.awaiting_new_entry)

    def test_divide_by_zero_shows_zero(self):
        self.assertEqual(_run("6", "÷", "0", "=").display, "0")

    def test_equals_without_pending_is_noop(self):
        state = _run("1", "2")
        self.assertIs(press_equals(state), state)

    def test_digit_after_equals_starts_new_number(self):
        self.assertEqual(_run("2", "+", "2", "=", "9").display, "9")

    def test_negative_result(self):
        self.assertEqual(_run("2", "-", "5", "=").display, "-3")


class TestClearAndBackspace(unittest.TestCase):

    def test_clear_returns_initial_state(self):
        for state in (
            _run("1", "2", "."),
            _run("3", "+"),
            _run("3", "+", "4", "="),
            CalculatorState(display="NaN", pending_value=1.0, pending_operator=Operator.DIVIDE),
        ):
            self.assertEqual(clear(state), INITIAL_STATE)
        self.assertEqual(
            INITIAL_STATE,
            CalculatorState(display="0", pending_value=None, pending_operator=None, awaiting_new_entry=False),
        )

    def test_backspace(self):
        self.assertEqual(backspace(CalculatorState(display="5")).display, "0")
        self.assertEqual(backspace(CalculatorState(display="42")).display, "4")
        self.assertEqual(backspace(CalculatorState(display="1.")).display, "1")

    def test_backspace_keeps_pending_fields(self):
        state = _run("3", "+", "4", "5", "BS")
        self.assertEqual(state.display, "4")
        self.assertEqual(state.pending_value, 3)
        self.assertEqual(state.pending_operator, Operator.ADD)

    def test_backspace_does_not_touch_awaiting_flag(self):
        state = _run("1", "2", "+", "BS")
        self.assertEqual(state.display, "1")
        self.assertTrue(state.awaiting_new_entry)

    def test_backspace_after_large_product(self):
        state = _run(*"1073741824", "×", *"1073741824", "=")
        self.assertEqual(state.display, "1152921504606847000")
        self.assertEqual(_run("BS", state=state).display, "115292150460684700")

    def test_backspace_to_lone_minus_parses_as_nan(self):
        state = _run("2", "-", "5", "=", "BS")
        self.assertEqual(state.display, "-")
        state = _run("+", "1", "=", state=state)
        self.assertEqual(state.display, "NaN")


class TestPerformValidation(unittest.TestCase):

    def test_unknown_action(self):
        with self.assertRaises(InvalidInput):
            perform(INITIAL_STATE, "sqrt")

    def test_bad_digit(self):
        for value in (None, "", "12", "a", 5):
            with self.assertRaises(InvalidInput):
                perform(INITIAL_STATE, "digit", value)

    def test_bad_operator(self):
        with self.assertRaises(InvalidInput):
            perform(INITIAL_STATE, "operator", "%")

    def test_operator_enum_value_accepted(self):
        state = perform(INITIAL_STATE, "operator", Operator.DIVIDE)
        self.assertEqual(state.pending_operator, Operator.DIVIDE)


class TestStateWireForm(unittest.TestCase):

    def test_round_trip(self):
        state = _run("1", "2", "+", "3")
        self.assertEqual(CalculatorState.from_dict(state.to_dict()), state)

    def test_to_dict(self):
        state = _run("1", "2", "÷")
        self.assertEqual(
            state.to_dict(),
            {
                "display": "12",
                "pending_value": "12",
                "pending_operator": "÷",
                "awaiting_new_entry": True,
            },
        )

    def test_nan_pending_value_survives(self):
        state = CalculatorState(display="-", pending_value=math.nan, pending_operator=Operator.ADD)
        data = state.to_dict()
        self.assertEqual(data["pending_value"], "NaN")
        self.assertTrue(math.isnan(CalculatorState.from_dict(data).pending_value))

    def test_numeric_pending_value_accepted(self):
        state = CalculatorState.from_dict({"display": "1", "pending_value": 2, "pending_operator": "+"})
        self.assertEqual(state.pending_value, 2.0)

    def test_missing_fields_default(self):
        self.assertEqual(CalculatorState.from_dict({}), INITIAL_STATE)

    def test_reachable_non_numeric_displays_accepted(self):
        for display in ("-", "NaN", "Infinity", "0."):
            self.assertEqual(CalculatorState.from_dict({"display": display}).display, display)

    def test_invalid_payloads(self):
        for data in (
            [],
            {"display": ""},
            {"display": 5},
            {"pending_value": True},
            {"pending_value": [1]},
            {"pending_operator": "^"},
            {"awaiting_new_entry": "yes"},
            {"display": "1.2.3"},
            {"display": ".."},
        ):
            with self.assertRaises(InvalidInput, msg=repr(data)):
                CalculatorState.from_dict(data)


if __name__ == "__main__":
    unittest.main()
