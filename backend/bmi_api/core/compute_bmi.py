"""BMI Computation — weight (kg) over height (m) squared.

Invariants:
    - Plain IEEE-754 double arithmetic, no rounding (display rounding is a UI concern)
    - Caller guarantees finite inputs and height_m != 0 (see enforce_measurements)
"""

from bmi_api.core.domain_types import BmiValue


def compute_bmi(weight_kg: float, height_m: float) -> BmiValue:
    """Return weight_kg / height_m². Never call without check_measurements first."""
    return BmiValue(weight_kg / (height_m * height_m))
