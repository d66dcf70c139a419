"""BMI Schemas — wire contract for POST /api/calculate.

Invariants:
    - BmiRequest: both fields required, strict numbers (no "70" or true coercion)
    - BmiRequest does NOT enforce positivity — the handler guard owns that rule
      so the failure keeps its own message and observability event
    - BmiResponse is frozen and carries the unrounded BMI

Design Decisions:
    - strict=True over Field(gt=0): a gt constraint would turn a domain failure
      into a generic malformed-input error, collapsing two distinct failure modes
"""

from pydantic import BaseModel, ConfigDict


class BmiRequest(BaseModel):
    """Weight in kilograms and height in meters (SI units)."""
    model_config = ConfigDict(strict=True)

    weight_kg: float
    height_m: float


class BmiResponse(BaseModel):
    """Calculated BMI and its WHO category label."""
    model_config = ConfigDict(frozen=True)

    bmi: float
    category: str
