"""Wire formatting helpers.

The service expects pair symbols in upper case inside the URL path and
numbers in plain decimal notation inside form bodies.
"""

from decimal import Decimal
from enum import Enum
from typing import Any

DEFAULT_PAIR = "GHS/BTC"


def normalize_pair(pair: str | None) -> str:
    """
    Upper-case a pair symbol, falling back to the default pair.

    Args:
        pair: Pair symbol such as ``"nmc/btc"``, or None

    Returns:
        Upper-cased pair symbol
    """
    return (pair or DEFAULT_PAIR).upper()


def format_wire_value(value: Any) -> str:
    """
    Render a parameter value for a form body.

    Floats and Decimals are written without exponent and without
    trailing zeros, so ``1e-08`` becomes ``"0.00000001"``.

    Args:
        value: Parameter value

    Returns:
        String suitable for the request body
    """
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (float, Decimal)):
        dec = Decimal(str(value)) if isinstance(value, float) else value
        text = format(dec, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text or "0"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
