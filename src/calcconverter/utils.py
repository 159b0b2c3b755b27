import math
import re
from decimal import Decimal
from typing import Optional

FAHRENHEIT_OFFSET = 32.0

# Leading numeric prefix, the same way a browser's parseFloat() reads it.
_LEADING_NUMBER = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_EXPONENT = re.compile(r"e([+-]?)0*(\d+)$")


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + FAHRENHEIT_OFFSET


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (fahrenheit - FAHRENHEIT_OFFSET) * 5 / 9


def parse_number(text: str) -> Optional[float]:
    """
    Parse the leading number of a string.

    Trailing garbage is ignored ("5 +" -> 5.0), so the previous operand
    display can be parsed directly. Returns None when no number is found.
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    token = match.group(1)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def _normalize_exponent(text: str, force_sign: bool) -> str:
    def repl(m: re.Match) -> str:
        sign = m.group(1) or ("+" if force_sign else "")
        return f"e{sign}{m.group(2)}"
    return _EXPONENT.sub(repl, text)


def format_non_finite(value: float) -> Optional[str]:
    """Return the display text for NaN/Infinity, None for finite values."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return None


def number_to_string(value: float) -> str:
    """
    Stringify a result for the calculator display.

    Integral values lose the ".0" suffix, everything else uses the shortest
    round-trip representation with a browser-style exponent (1e-7, 1e+21).
    Integers past 1e16 keep only the shortest round-trip digits, padded with
    zeros (2**60 -> 1152921504606847000).
    """
    special = format_non_finite(value)
    if special is not None:
        return special
    if value == 0:
        return "0"
    text = repr(value)
    if value.is_integer() and abs(value) < 1e21:
        if abs(value) < 1e16:
            return str(int(value))
        return f"{Decimal(text):f}"
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1:
        # Python switches to exponents earlier than the display does.
        return f"{Decimal(text):f}"
    return _normalize_exponent(text, force_sign=True)


def to_exponential(value: float, digits: int) -> str:
    """Exponential notation with a fixed number of fractional digits."""
    return _normalize_exponent(f"{value:.{digits}e}", force_sign=True)
