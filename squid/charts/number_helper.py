"""Number formatting helpers for chart labels.

Formats follow the usual US conventions: ``,`` groups thousands, ``.``
separates decimals, currency is prefixed with ``$`` and rounding is
half-up on the decimal value (``2.675`` rounds to ``2.68``).
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Number


DELIMITED_REGEX = re.compile(r"(\d)(?=(\d{3})+(?!\d))")


def _to_decimal(number) -> Decimal:
    """Convert ``number`` to Decimal, raising TypeError/ValueError when it is not numeric."""
    if isinstance(number, bool):
        raise TypeError(f"Expected a number, got {number!r}")
    if isinstance(number, Decimal):
        value = number
    elif isinstance(number, int):
        value = Decimal(number)
    else:
        # str() keeps the shortest repr, so 0.1 stays 0.1 instead of 0.1000000000000000055...
        value = Decimal(str(float(number)))
    if not value.is_finite():
        raise ValueError(f"Expected a finite number, got {number!r}")
    return value


def _quantize(value: Decimal, precision: int) -> Decimal:
    """Round ``value`` half-up to ``precision`` decimals at any magnitude."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + precision + 2)
        return value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


def number_to_delimited(number, delimiter: str = ",", separator: str = ".") -> str:
    """Group the integer part of ``number`` in threes.

    The fractional part is kept exactly as Python prints it, so
    ``1234.5`` becomes ``"1,234.5"`` and ``1234`` becomes ``"1,234"``.
    """
    if isinstance(number, bool) or not isinstance(number, (Number, str)):
        raise TypeError(f"Expected a number, got {number!r}")
    if isinstance(number, str):
        number = float(number)
    left, _, right = str(number).partition(".")
    left = DELIMITED_REGEX.sub(rf"\1{delimiter}", left)
    return f"{left}{separator}{right}" if right else left


def number_to_rounded(number, precision: int = 3, delimiter: str = "") -> str:
    """Round half-up to ``precision`` decimals and print with exactly that many."""
    rounded = _quantize(_to_decimal(number), precision)
    text = f"{rounded:f}"
    if delimiter:
        left, _, right = text.partition(".")
        left = DELIMITED_REGEX.sub(rf"\1{delimiter}", left)
        text = f"{left}.{right}" if right else left
    return text


def number_to_percentage(number, precision: int = 3) -> str:
    """``12.345`` -> ``"12.345%"``; no thousands delimiter."""
    return f"{number_to_rounded(number, precision=precision)}%"


def number_to_currency(number, unit: str = "$", precision: int = 2) -> str:
    """``-1234.5`` -> ``"-$1,234.50"``."""
    value = _to_decimal(number)
    text = number_to_rounded(value.copy_abs(), precision=precision, delimiter=",")
    sign = "-" if value < 0 and Decimal(text.replace(",", "")) != 0 else ""
    return f"{sign}{unit}{text}"


def number_to_minutes_and_seconds(number) -> str:
    """Whole seconds as ``minutes:seconds``: ``125`` -> ``"2:05"``, ``3600`` -> ``"60:00"``."""
    seconds = int(_quantize(_to_decimal(number), 0))
    return f"{seconds // 60}:{seconds % 60:02d}"


__all__ = [
    "number_to_delimited",
    "number_to_rounded",
    "number_to_percentage",
    "number_to_currency",
    "number_to_minutes_and_seconds",
]
