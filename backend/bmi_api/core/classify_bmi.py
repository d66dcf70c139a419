"""BMI Classification — maps a BMI value onto a WHO-style category.

Invariants:
    - Half-open intervals, lower bound inclusive: a value sitting exactly on a
      threshold belongs to the UPPER category (18.5 → Normal weight,
      25.0 → Overweight, 30.0 → Obese)
    - Every finite float maps to exactly one category
    - Non-finite input is outside the contract — the measurement guard
      rejects it upstream (NaN would otherwise fall through to OBESE)
"""

from bmi_api.core.domain_types import BmiCategory

UNDERWEIGHT_UPPER = 18.5
NORMAL_UPPER = 25.0
OVERWEIGHT_UPPER = 30.0


def classify(bmi: float) -> BmiCategory:
    """Classify a finite BMI value."""
    if bmi < UNDERWEIGHT_UPPER:
        return BmiCategory.UNDERWEIGHT
    if bmi < NORMAL_UPPER:
        return BmiCategory.NORMAL
    if bmi < OVERWEIGHT_UPPER:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE
