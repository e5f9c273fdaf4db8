"""
Money rounding shared by the quote calculator and the agent directory.
Values are rounded half-up on the exact binary value of the float, so `1.005` becomes `1.0`.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

_CENTS = Decimal("0.01")
# Wide enough to quantize any finite float to cents.
_CONTEXT = Context(prec=400)


def round_half_up(value: float) -> float:
    """Round half-up to two decimals using the exact binary value of `value`."""

    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_CONTEXT))
