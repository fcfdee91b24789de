"""History endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from price_solver.api.deps import (
    get_app_settings,
    get_calculator_service,
    get_history_service,
)
from price_solver.api.schemas import (
    ConversionRequest,
    HistoryListResponse,
    HistoryRecordResponse,
)
from price_solver.config.settings import Settings
from price_solver.core.exceptions import NoResultError
from price_solver.services import CalculatorService, HistoryService

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=HistoryListResponse)
def list_history(
    oldest_first: bool = Query(False, description="Return records in insertion order"),
    history: HistoryService = Depends(get_history_service),
    settings: Settings = Depends(get_app_settings),
) -> HistoryListResponse:
    """List saved calculations, newest first by default."""
    records = history.list_records(newest_first=not oldest_first)
    return HistoryListResponse(
        records=[
            HistoryRecordResponse.from_record(r, settings.display_timezone)
            for r in records
        ],
        count=len(records),
        capacity=history.ledger.capacity,
    )


@router.post("", response_model=HistoryRecordResponse, status_code=201)
def save_calculation(
    data: ConversionRequest,
    calculator: CalculatorService = Depends(get_calculator_service),
    history: HistoryService = Depends(get_history_service),
    settings: Settings = Depends(get_app_settings),
) -> HistoryRecordResponse:
    """Evaluate the inputs and save the result to history."""
    calculation = calculator.calculate(data.to_input())
    record = history.save(calculation)
    if record is None:
        raise NoResultError()
    return HistoryRecordResponse.from_record(record, settings.display_timezone)


@router.delete("", status_code=204)
def clear_history(
    history: HistoryService = Depends(get_history_service),
) -> Response:
    """Remove every saved calculation."""
    history.clear()
    return Response(status_code=204)
