"""Decimal helpers shared by the engine, rounding and formatting."""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union


def to_decimal(value: Union[int, float, Decimal]) -> Decimal:
    """Exact decimal for an int, or the shortest decimal text of a float."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(value))


def quantize_half_up(value: Union[int, float, Decimal], places: int) -> Decimal:
    """Round to ``places`` decimal digits, ties away from zero."""
    d = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, d.adjusted() + places + 2)
        return d.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
