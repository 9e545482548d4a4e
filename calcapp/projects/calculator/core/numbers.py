"""
Number <-> text conversion for the calculator display.

The display is plain text, so every arithmetic step goes through a parse and
a render. Both follow browser semantics (parseFloat / String(number)) so the
page shows exactly what a script-only calculator would.
"""
import math
import re
from decimal import Decimal

# Longest numeric prefix, same grammar parseFloat accepts
_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

# Plain decimal notation is used inside this magnitude range
PLAIN_MIN = 1e-6
PLAIN_MAX = 1e21


def parse_number(text: str) -> float:
    """Parse the leading number in text; returns NaN when there is none."""
    match = _NUMERIC_PREFIX.match(text.lstrip())
    if not match:
        return math.nan
    return float(match.group(0))


def number_to_string(value: float) -> str:
    """
    Render a float the way the display stores it.

    Integers drop the trailing ".0" and keep only their shortest significant
    digits, values between 1e-6 and 1e21 use plain
    notation, everything else uses a short exponent ("1e-7", "1.5e+21").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    magnitude = abs(value)
    if PLAIN_MIN <= magnitude < PLAIN_MAX:
        # repr is the shortest round-tripping form; Decimal expands its exponent
        # and pads large integers with zeros (2**60 -> 1152921504606847000)
        text = format(Decimal(repr(value)), "f")
        return text[:-2] if text.endswith(".0") else text

    # repr already uses exponent form outside 1e-4..1e16
    mantissa, _, exponent = repr(value).partition("e")
    power = int(exponent)
    sign = "+" if power >= 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"
