"""Calculate Handler — turns one BmiRequest into a BmiResponse or a typed error.

Invariants:
    - check_measurements runs BEFORE compute_bmi — compute_bmi is never reached
      with a non-positive or non-finite input (no division by zero)
    - On rejection, compute_bmi and classify are never invoked and no
      calculation_succeeded event is emitted
    - Stateless apart from the observer reference: same input → same output

Design Decisions:
    - Observer injected, not a module-level logger: tests assert on events
      without a logging subsystem attached
    - Overflowed BMI (inf from finite inputs) rejected here rather than
      serialized as JSON null
"""

import math

from bmi_api.core.classify_bmi import classify
from bmi_api.core.compute_bmi import compute_bmi
from bmi_api.core.enforce_measurements import check_measurements
from bmi_api.core.errors import BmiOutOfRangeError, InvalidMeasurementError
from bmi_api.core.observer_protocols import CalculationObserver
from bmi_api.schemas.bmi import BmiRequest, BmiResponse


class BmiCalculationHandler:
    """Validate → compute → classify, reporting each step to the observer."""

    def __init__(self, observer: CalculationObserver):
        self._observer = observer

    def calculate(self, request: BmiRequest) -> BmiResponse:
        weight_kg, height_m = request.weight_kg, request.height_m
        self._observer.calculation_requested(weight_kg, height_m)

        error = check_measurements(weight_kg, height_m)
        if error is not None:
            self._observer.validation_failed(weight_kg, height_m)
            raise InvalidMeasurementError(
                weight_kg, height_m,
                message=error["message"], code=error["error_code"],
            )

        bmi = compute_bmi(weight_kg, height_m)
        if not math.isfinite(bmi):
            self._observer.validation_failed(weight_kg, height_m)
            raise BmiOutOfRangeError(weight_kg, height_m)

        category = classify(bmi)
        self._observer.calculation_succeeded(bmi, category)
        return BmiResponse(bmi=bmi, category=category.value)
