"""Decimal helpers shared by scoring and booster draws."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

_ONE_PLACE = Decimal("0.1")


def to_decimal(value: float | int | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # shortest repr: 0.04 -> Decimal("0.04")
    return Decimal(str(value))


def round_points(value: Decimal) -> Decimal:
    """Round half-up to one decimal place.

    Raises ValueError for infinite or NaN values.
    """

    if not value.is_finite():
        raise ValueError(f"Cannot round non-finite points value {value}")
    with localcontext() as ctx:
        # every integer digit plus the tenths place
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
    if not rounded:
        # normalise -0.0
        return abs(rounded)
    return rounded
