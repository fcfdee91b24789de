"""Calculator service: parses raw inputs, converts, rounds and derives THB."""

import logging
import math
import re
from typing import Optional

from price_solver.core.numbers import quantize_half_up, to_decimal
from price_solver.domain.models import Asset, HistoryRecord
from price_solver.domain.views import Calculation, CalculationInput, RawNumber
from price_solver.services.conversion_engine import convert

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 2
MIN_PRECISION = 0
MAX_PRECISION = 8

# 1,234 / -65,000.50 / 1,234,567.
_GROUPED_NUMBER = re.compile(r"[+-]?\d{1,3}(?:,\d{3})+(?:\.\d*)?")


def parse_number(raw: RawNumber) -> Optional[float]:
    """
    Parse a user-supplied number.

    Text is stripped and well-formed en-US thousands grouping is removed;
    any other comma makes the text unparseable. Empty, unparseable or
    non-finite input gives None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    else:
        text = str(raw).strip()
        if not text:
            return None
        if "," in text:
            if not _GROUPED_NUMBER.fullmatch(text):
                return None
            text = text.replace(",", "")
        try:
            value = float(text)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def parse_precision(raw: RawNumber, default: int = DEFAULT_PRECISION) -> int:
    """Parse a precision, falling back to ``default``, clamped to [0, 8]."""
    value = parse_number(raw)
    precision = default if value is None else int(value)
    return max(MIN_PRECISION, min(MAX_PRECISION, precision))


def parse_exchange_rate(raw: RawNumber) -> float:
    """Parse a USD->THB rate; anything unusable or negative becomes 0."""
    value = parse_number(raw)
    if value is None or value < 0:
        return 0.0
    return value


def round_result(value: float, precision: int) -> float:
    """Round half away from zero to ``precision`` digits (clamped to [0, 8])."""
    precision = max(MIN_PRECISION, min(MAX_PRECISION, precision))
    return float(quantize_half_up(value, precision))


def secondary_value(rounded: Optional[float], exchange_rate: float) -> Optional[float]:
    """THB value of a rounded USD result; None unless the rate is positive."""
    if rounded is None or not exchange_rate > 0:
        return None
    return float(to_decimal(rounded) * to_decimal(exchange_rate))


class CalculatorService:
    """
    Caller-level logic around the conversion engine.

    Turns raw presentation-layer inputs into a Calculation and builds history
    records from calculations that have a result.
    """

    def __init__(
        self,
        default_precision: RawNumber = DEFAULT_PRECISION,
        default_exchange_rate: RawNumber = "35.00",
    ):
        self._default_precision = parse_precision(default_precision)
        self._default_exchange_rate = default_exchange_rate

    def calculate(self, data: CalculationInput) -> Calculation:
        """Evaluate one set of calculator inputs."""
        source = Asset(data.source_asset)
        target = Asset(data.target_asset)

        precision = parse_precision(data.precision, default=self._default_precision)
        raw_rate = data.exchange_rate
        if raw_rate is None:
            raw_rate = self._default_exchange_rate
        exchange_rate = parse_exchange_rate(raw_rate)

        source_value = parse_number(data.value)
        result = None
        if source_value is not None:
            result = convert(target, source, source_value)

        rounded = round_result(result, precision) if result is not None else None
        logger.debug(
            "Calculated %s -> %s from %r: %r (rounded %r)",
            source.value,
            target.value,
            data.value,
            result,
            rounded,
        )

        return Calculation(
            source_asset=source,
            target_asset=target,
            source_value=source_value,
            result=result,
            rounded_result=rounded,
            precision=precision,
            exchange_rate=exchange_rate,
            thb_value=secondary_value(rounded, exchange_rate),
        )

    def swap(self, data: CalculationInput) -> Calculation:
        """Exchange source and target assets and evaluate again."""
        return self.calculate(data.swapped())

    @staticmethod
    def to_record(calculation: Calculation, timestamp: int) -> Optional[HistoryRecord]:
        """Build a history record, or None if there is nothing to save."""
        if not calculation.has_result or calculation.source_value is None:
            return None
        return HistoryRecord(
            timestamp=timestamp,
            source_asset=calculation.source_asset,
            target_asset=calculation.target_asset,
            source_value=calculation.source_value,
            result_value=calculation.rounded_result,
            precision=calculation.precision,
            exchange_rate=calculation.exchange_rate,
        )
