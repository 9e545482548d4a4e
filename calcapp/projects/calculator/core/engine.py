"""
Calculator engine: state value and the transitions driven by user input.

Every operation is a pure function that takes a CalculatorState (plus the
input) and returns the next CalculatorState. Nothing here raises for an
arithmetic edge case; division by zero and unparseable displays resolve to a
defined value instead.
"""
import enum
import logging
import math
from dataclasses import dataclass, replace

from calcapp.projects.calculator.core.numbers import number_to_string, parse_number

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class InvalidInput(ValueError):
    """Raised when a request carries an action or state the engine cannot use."""


class Operator(enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"


@dataclass(frozen=True)
class CalculatorState:
    display: str = "0"
    pending_value: float | None = None
    pending_operator: Operator | None = None
    awaiting_new_entry: bool = False

    def to_dict(self):
        """JSON-safe form; pending_value is sent as text so NaN/Infinity survive."""
        return {
            "display": self.display,
            "pending_value": (
                None if self.pending_value is None else number_to_string(self.pending_value)
            ),
            "pending_operator": (
                None if self.pending_operator is None else self.pending_operator.value
            ),
            "awaiting_new_entry": self.awaiting_new_entry,
        }

    @classmethod
    def from_dict(cls, data):
        """Build a state from its JSON form. Raises InvalidInput on bad fields."""
        if not isinstance(data, dict):
            raise InvalidInput("State must be an object")

        display = data.get("display", "0")
        if not isinstance(display, str) or not display:
            raise InvalidInput("Display must be a non-empty string")
        # "-" and "NaN" are reachable through backspace and NaN results, so
        # only the decimal point count is checked here
        if display.count(".") > 1:
            raise InvalidInput("Display may contain at most one decimal point")

        raw_value = data.get("pending_value")
        if raw_value is None:
            pending_value = None
        elif isinstance(raw_value, bool):
            raise InvalidInput("Pending value must be a number")
        elif isinstance(raw_value, (int, float)):
            pending_value = float(raw_value)
        elif isinstance(raw_value, str):
            pending_value = parse_number(raw_value)
        else:
            raise InvalidInput("Pending value must be a number")

        raw_operator = data.get("pending_operator")
        pending_operator = None if raw_operator is None else parse_operator(raw_operator)

        awaiting = data.get("awaiting_new_entry", False)
        if not isinstance(awaiting, bool):
            raise InvalidInput("awaiting_new_entry must be a boolean")

        return cls(
            display=display,
            pending_value=pending_value,
            pending_operator=pending_operator,
            awaiting_new_entry=awaiting,
        )


INITIAL_STATE = CalculatorState()


def parse_operator(symbol) -> Operator:
    """Map an operator symbol ("+", "-", "×", "÷") to its Operator."""
    try:
        return Operator(symbol)
    except ValueError:
        raise InvalidInput(f"Unknown operator: {symbol!r}") from None


def apply(operator, a: float, b: float) -> float:
    """
    Binary arithmetic for one operator step.

    Division by zero gives 0 so the display always stays numeric. An
    unrecognised operator tag leaves the right operand as the result.
    """
    try:
        operator = Operator(operator)
    except ValueError:
        return b

    if operator is Operator.ADD:
        return a + b
    if operator is Operator.SUBTRACT:
        return a - b
    if operator is Operator.MULTIPLY:
        return a * b
    return a / b if b != 0 else 0.0


def input_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if state.awaiting_new_entry:
        return replace(state, display=digit, awaiting_new_entry=False)
    if state.display == "0":
        return replace(state, display=digit)
    return replace(state, display=state.display + digit)


def input_decimal(state: CalculatorState) -> CalculatorState:
    if state.awaiting_new_entry:
        return replace(state, display="0.", awaiting_new_entry=False)
    if "." not in state.display:
        return replace(state, display=state.display + ".")
    return state


def press_operator(state: CalculatorState, operator: Operator) -> CalculatorState:
    """
    Capture the display as the left operand, or fold it into the running total.

    Pressing an operator again without typing keeps re-applying the current
    display as both operands (3 + + shows 6, a third + shows 12).
    """
    input_value = parse_number(state.display)

    if state.pending_value is None:
        return replace(
            state,
            pending_value=input_value,
            pending_operator=operator,
            awaiting_new_entry=True,
        )

    if state.pending_operator is None:
        return state

    current_value = 0.0 if math.isnan(state.pending_value) else state.pending_value
    result = apply(state.pending_operator, current_value, input_value)
    return CalculatorState(
        display=number_to_string(result),
        pending_value=result,
        pending_operator=operator,
        awaiting_new_entry=True,
    )


def press_equals(state: CalculatorState) -> CalculatorState:
    if state.pending_operator is None or state.pending_value is None:
        return state

    result = apply(state.pending_operator, state.pending_value, parse_number(state.display))
    return CalculatorState(display=number_to_string(result), awaiting_new_entry=True)


def clear(state: CalculatorState) -> CalculatorState:
    return INITIAL_STATE


def backspace(state: CalculatorState) -> CalculatorState:
    if len(state.display) > 1:
        return replace(state, display=state.display[:-1])
    return replace(state, display="0")


def perform(state: CalculatorState, action: str, value=None) -> CalculatorState:
    """
    Dispatch a named action ("digit", "decimal", "operator", "equals",
    "clear", "backspace") to its transition.

    value is the digit character for "digit" and the operator symbol (or
    Operator) for "operator"; it is ignored otherwise.
    """
    if action == "digit":
        if not isinstance(value, str) or len(value) != 1 or value not in DIGITS:
            raise InvalidInput(f"Digit must be a single character 0-9, got {value!r}")
        next_state = input_digit(state, value)
    elif action == "decimal":
        next_state = input_decimal(state)
    elif action == "operator":
        next_state = press_operator(state, parse_operator(value))
    elif action == "equals":
        next_state = press_equals(state)
    elif action == "clear":
        next_state = clear(state)
    elif action == "backspace":
        next_state = backspace(state)
    else:
        raise InvalidInput(f"Unknown action: {action!r}")

    logger.debug("%s(%r): %r -> %r", action, value, state.display, next_state.display)
    return next_state
