"""Conversion endpoints."""

from fastapi import APIRouter, Depends

from price_solver.api.deps import get_calculator_service
from price_solver.api.schemas import ConversionRequest, ConversionResponse
from price_solver.services import CalculatorService

router = APIRouter(prefix="/convert", tags=["convert"])


@router.post("", response_model=ConversionResponse)
def convert_price(
    data: ConversionRequest,
    calculator: CalculatorService = Depends(get_calculator_service),
) -> ConversionResponse:
    """
    Convert a price of the source asset into the target asset.

    Invalid input and same-asset pairs are not errors: the result fields
    come back null.
    """
    calculation = calculator.calculate(data.to_input())
    return ConversionResponse.from_calculation(calculation)


@router.post("/swap", response_model=ConversionResponse)
def swap_assets(
    data: ConversionRequest,
    calculator: CalculatorService = Depends(get_calculator_service),
) -> ConversionResponse:
    """Swap source and target assets and convert again."""
    calculation = calculator.swap(data.to_input())
    return ConversionResponse.from_calculation(calculation)
