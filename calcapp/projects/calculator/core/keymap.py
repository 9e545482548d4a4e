"""
Keyboard bindings: KeyboardEvent.key values mapped to engine actions.
"""
from typing import NamedTuple

from calcapp.projects.calculator.core.engine import DIGITS, Operator


class KeyBinding(NamedTuple):
    action: str
    value: str | None = None
    prevent_default: bool = False


KEY_BINDINGS = {
    **{digit: KeyBinding("digit", digit) for digit in DIGITS},
    ".": KeyBinding("decimal"),
    "+": KeyBinding("operator", Operator.ADD.value),
    "-": KeyBinding("operator", Operator.SUBTRACT.value),
    "*": KeyBinding("operator", Operator.MULTIPLY.value),
    # "/" opens quick find in some browsers
    "/": KeyBinding("operator", Operator.DIVIDE.value, prevent_default=True),
    "Enter": KeyBinding("equals"),
    "=": KeyBinding("equals"),
    "Escape": KeyBinding("clear"),
    "c": KeyBinding("clear"),
    "C": KeyBinding("clear"),
    "Backspace": KeyBinding("backspace"),
}


def resolve_key(key) -> KeyBinding | None:
    """Binding for a key, or None when the calculator ignores it."""
    if not isinstance(key, str):
        return None
    return KEY_BINDINGS.get(key)


def client_key_table():
    """Key table for the page script: key -> {action, value, prevent_default}."""
    return {key: binding._asdict() for key, binding in KEY_BINDINGS.items()}
