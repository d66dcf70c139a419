"""Calculate Route — POST /api/calculate.

Invariants:
    - Body shape validated by Pydantic before reaching the route (malformed → 400)
    - Domain failures raised as BmiError and shaped by the global handler
    - Handler obtained through Depends so tests can swap the observer

Design Decisions:
    - Sync pure work inside an async route: microseconds of arithmetic, no IO,
      not worth a threadpool hop
"""

from fastapi import APIRouter, Depends

from bmi_api.infrastructure.observability import LoggingCalculationObserver
from bmi_api.schemas.bmi import BmiRequest, BmiResponse
from bmi_api.services.handle_calculate import BmiCalculationHandler

router = APIRouter(prefix="/api", tags=["bmi"])


def get_calculation_handler() -> BmiCalculationHandler:
    return BmiCalculationHandler(LoggingCalculationObserver())


@router.post("/calculate", response_model=BmiResponse)
async def calculate_bmi(
    body: BmiRequest,
    handler: BmiCalculationHandler = Depends(get_calculation_handler),
):
    """Calculate BMI and WHO category from weight (kg) and height (m)."""
    return handler.calculate(body)
