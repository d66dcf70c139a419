"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - WeightKg, HeightM, BmiValue wrap float (SI units only)
    - BmiCategory is a closed set of four labels — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: the value IS the wire label, serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

WeightKg = NewType("WeightKg", float)   # > 0, finite
HeightM = NewType("HeightM", float)     # > 0, finite
BmiValue = NewType("BmiValue", float)


# ─── Enums ───────────────────────────────────────────────────────

class BmiCategory(str, Enum):
    """WHO-style health categories, ordered by severity."""
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"
