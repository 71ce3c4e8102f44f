"""Calculator handler: the four basic arithmetic operations."""

import math
from decimal import Decimal
from typing import Callable, Dict, Tuple

from models.arguments import CalculatorArguments
from models.data_models import ToolResult

RESULT_PRECISION = 6


def _divide(a: float, b: float) -> float:
    # Validation already rejects this; kept for callers that skip it.
    if b == 0:
        raise ZeroDivisionError("Cannot divide by zero")
    return a / b


# operation -> (label, symbol, function)
OPERATIONS: Dict[str, Tuple[str, str, Callable[[float, float], float]]] = {
    "add": ("Addition", "+", lambda a, b: a + b),
    "subtract": ("Subtraction", "-", lambda a, b: a - b),
    "multiply": ("Multiplication", "×", lambda a, b: a * b),
    "divide": ("Division", "÷", _divide),
}


def format_number(value: float) -> str:
    """Shortest round-tripping text for a number, in JavaScript notation.

    Magnitudes from 1e21 up or below 1e-6 use an exponent (``1e+308``),
    everything else is positional. Overflow prints as ``Infinity``.

    >>> format_number(15.0)
    '15'
    >>> format_number(1e308)
    '1e+308'
    >>> format_number(0.00001)
    '0.00001'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    text = repr(value)
    if "e" not in text:
        return text[:-2] if text.endswith(".0") else text
    magnitude = abs(value)
    if magnitude >= 1e21 or magnitude < 1e-6:
        mantissa, exponent = text.split("e")
        exp = int(exponent)
        return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
    return format(Decimal(text), "f")


def format_operand(value: float) -> str:
    """Print a number the way the caller wrote it: ``15.0`` becomes ``15``."""
    return format_number(value)


def format_result(value: float) -> str:
    """Integral results print bare, others with up to six decimals.

    >>> format_result(10 / 3)
    '3.333333'
    >>> format_result(2.5 * 4)
    '10'
    """
    if not math.isfinite(value) or float(value).is_integer():
        return format_number(value)
    text = f"{value:.{RESULT_PRECISION}f}".rstrip("0").rstrip(".")
    # Tiny negatives round to "-0"
    return "0" if text == "-0" else text


def calculate(operation: str, a: float, b: float) -> float:
    """Apply ``operation`` to the operands.

    Raises:
        ValueError: If the operation is not supported
        ZeroDivisionError: If dividing by zero
    """
    try:
        _, _, func = OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"Unsupported operation: {operation}") from None
    return func(a, b)


def handle_calculate(args: CalculatorArguments) -> ToolResult:
    """Describe the operation and its result, e.g. ``Addition: 5 + 3 = 8``.

    Results that overflow the float range print as ``Infinity``.

    Raises:
        ZeroDivisionError: If dividing by zero
    """
    label, symbol, _ = OPERATIONS[args.operation]
    result = calculate(args.operation, args.a, args.b)
    return ToolResult.text(
        f"{label}: {format_operand(args.a)} {symbol} {format_operand(args.b)} = {format_result(result)}"
    )
