"""Conversion engine: prices one asset in terms of another.

Three regression equations were fitted once and are treated as constants:

    Gold   = -0.000007 * BTC  + 1784.21
    Silver = -0.000015 * BTC  + 23.14
    Silver =  0.0135   * Gold - 0.51

The remaining three directions are the algebraic inverses of these, computed
from the same coefficients so that converting there and back returns the
starting value.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Union

from price_solver.core.numbers import to_decimal
from price_solver.domain.models import Asset

Number = Union[int, float]


@dataclass(frozen=True)
class Regression:
    """Linear relation ``y = slope * x + intercept`` between two assets."""

    y: Asset
    x: Asset
    slope: Decimal
    intercept: Decimal

    def apply(self, x: Decimal) -> Decimal:
        """Price of ``y`` given a price of ``x``."""
        return self.slope * x + self.intercept

    def invert(self, y: Decimal) -> Decimal:
        """Price of ``x`` given a price of ``y``."""
        return (y - self.intercept) / self.slope


GOLD_FROM_BTC = Regression(Asset.GOLD, Asset.BITCOIN, Decimal("-0.000007"), Decimal("1784.21"))
SILVER_FROM_BTC = Regression(Asset.SILVER, Asset.BITCOIN, Decimal("-0.000015"), Decimal("23.14"))
SILVER_FROM_GOLD = Regression(Asset.SILVER, Asset.GOLD, Decimal("0.0135"), Decimal("-0.51"))

REGRESSIONS: tuple[Regression, ...] = (GOLD_FROM_BTC, SILVER_FROM_BTC, SILVER_FROM_GOLD)


def _build_formulas() -> dict[tuple[Asset, Asset], Callable[[Decimal], Decimal]]:
    """Map (target, source) to a formula, two directions per regression."""
    formulas: dict[tuple[Asset, Asset], Callable[[Decimal], Decimal]] = {}
    for regression in REGRESSIONS:
        formulas[(regression.y, regression.x)] = regression.apply
        formulas[(regression.x, regression.y)] = regression.invert
    return formulas


FORMULAS = _build_formulas()


def is_finite_number(value: object) -> bool:
    """Return True for real, finite ints and floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def supported_pairs() -> list[tuple[Asset, Asset]]:
    """List every (target, source) pair with a defined formula."""
    return list(FORMULAS)


def convert(target: Asset, source: Asset, value: Number) -> Optional[float]:
    """
    Convert a price of ``source`` into the matching price of ``target``.

    Returns None when ``value`` is not a finite number or when
    ``target == source``; identity pairs are unsupported rather than mapped
    to themselves. Never raises for those cases.
    """
    if not is_finite_number(value):
        return None
    if target == source:
        return None

    formula = FORMULAS.get((Asset(target), Asset(source)))
    if formula is None:
        return None

    result = float(formula(to_decimal(value)))
    # Results beyond float range are no result, not infinity
    return result if math.isfinite(result) else None
