"""
Presentation helpers: what the page shows for a given CalculatorState.
Nothing here changes state.
"""
import math
from decimal import ROUND_HALF_UP, Context, Decimal

from calcapp.projects.calculator.core.numbers import number_to_string, parse_number

GROUPING_THRESHOLD = 1000
MAX_FRACTION_DIGITS = 3

# Enough precision to quantize any finite double to 3 places
_GROUPING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)

BACKSPACE_GLYPH = "⌫"

# Button grid, top to bottom. span is the number of grid columns.
BUTTON_ROWS = [
    [
        {"label": "Clear", "action": "clear", "value": None, "kind": "clear", "span": 2},
        {"label": BACKSPACE_GLYPH, "action": "backspace", "value": None, "kind": "backspace", "span": 1},
        {"label": "÷", "action": "operator", "value": "÷", "kind": "operator", "span": 1},
    ],
    [
        {"label": "7", "action": "digit", "value": "7", "kind": "digit", "span": 1},
        {"label": "8", "action": "digit", "value": "8", "kind": "digit", "span": 1},
        {"label": "9", "action": "digit", "value": "9", "kind": "digit", "span": 1},
        {"label": "×", "action": "operator", "value": "×", "kind": "operator", "span": 1},
    ],
    [
        {"label": "4", "action": "digit", "value": "4", "kind": "digit", "span": 1},
        {"label": "5", "action": "digit", "value": "5", "kind": "digit", "span": 1},
        {"label": "6", "action": "digit", "value": "6", "kind": "digit", "span": 1},
        {"label": "-", "action": "operator", "value": "-", "kind": "operator", "span": 1},
    ],
    [
        {"label": "1", "action": "digit", "value": "1", "kind": "digit", "span": 1},
        {"label": "2", "action": "digit", "value": "2", "kind": "digit", "span": 1},
        {"label": "3", "action": "digit", "value": "3", "kind": "digit", "span": 1},
        {"label": "+", "action": "operator", "value": "+", "kind": "operator", "span": 1},
    ],
    [
        {"label": "0", "action": "digit", "value": "0", "kind": "digit", "span": 2},
        {"label": ".", "action": "decimal", "value": None, "kind": "digit", "span": 1},
        {"label": "=", "action": "equals", "value": None, "kind": "equals", "span": 1},
    ],
]


def _group_thousands(number: float) -> str:
    """1234567.891 -> '1,234,567.891'; at most 3 fraction digits, zeros dropped."""
    if math.isinf(number):
        return "∞" if number > 0 else "-∞"
    rounded = Decimal(repr(number)).quantize(Decimal("0.001"), context=_GROUPING_CONTEXT)
    text = format(rounded, ",f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_display(text: str) -> str:
    """
    Text shown in the main display. Values of 1000 or more get thousands
    separators; anything smaller, or not a number at all, is shown as typed
    so a trailing "." or leading zeros after the point stay visible.
    """
    number = parse_number(text)
    if math.isnan(number):
        return text
    if abs(number) >= GROUPING_THRESHOLD:
        return _group_thousands(number)
    return text


def summary_line(state) -> str:
    """Pending operand and operator, e.g. '12 +'; empty when nothing is pending."""
    if state.pending_value is None or state.pending_operator is None:
        return ""
    return f"{number_to_string(state.pending_value)} {state.pending_operator.value}"


def view_model(state):
    """Everything the page needs to redraw after an input."""
    return {
        "state": state.to_dict(),
        "display": format_display(state.display),
        "summary": summary_line(state),
    }
