"""Measurement Enforcement — pure precondition check before any computation.

Invariants:
    - Returns None when both measurements are finite and strictly positive
    - Returns an error dict otherwise (0.0, -0.0, negatives, NaN, ±Infinity)
    - Never raises — the shell decides how to surface the error

Design Decisions:
    - Explicit math.isfinite check: NaN compares False against every bound,
      so a bare `<= 0.0` guard would let it through to the classifier
"""

import math

INVALID_MEASUREMENTS_CODE = "INVALID_MEASUREMENTS"
INVALID_MEASUREMENTS_MESSAGE = "Weight and height must be positive numbers"


def is_positive_finite(value: float) -> bool:
    return math.isfinite(value) and value > 0.0


def check_measurements(weight_kg: float, height_m: float) -> dict | None:
    """Validate weight and height. Returns error dict or None."""
    if is_positive_finite(weight_kg) and is_positive_finite(height_m):
        return None
    return {
        "status": "error",
        "error_code": INVALID_MEASUREMENTS_CODE,
        "message": INVALID_MEASUREMENTS_MESSAGE,
    }
