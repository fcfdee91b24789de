"""View models for service outputs."""

from price_solver.domain.views.calculation import (
    CalculationInput,
    Calculation,
    RawNumber,
)

__all__ = [
    "CalculationInput",
    "Calculation",
    "RawNumber",
]
