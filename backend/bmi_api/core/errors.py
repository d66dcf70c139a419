"""Error Hierarchy — typed, categorized exceptions for all BMI API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level and recoverable — there is no 5xx path in core logic
    - message is user-facing and fixed per error type; raw inputs live on attributes

Design Decisions:
    - Single hierarchy with BmiError base: one FastAPI handler catches all
    - http_status carried on the error so the shell never switches on type
"""

from enum import Enum

from bmi_api.core.enforce_measurements import (
    INVALID_MEASUREMENTS_CODE, INVALID_MEASUREMENTS_MESSAGE,
)


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


class BmiError(Exception):
    """Base exception for all BMI API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        """Structured fields for the logging `extra` kwarg."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidMeasurementError(BmiError):
    """Weight or height is not a strictly positive finite number."""
    def __init__(
        self,
        weight_kg: float,
        height_m: float,
        message: str = INVALID_MEASUREMENTS_MESSAGE,
        code: str = INVALID_MEASUREMENTS_CODE,
    ):
        super().__init__(
            message, code,
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.weight_kg = weight_kg
        self.height_m = height_m


class BmiOutOfRangeError(BmiError):
    """Finite inputs whose BMI overflows a double (e.g. 1e308 kg at 1e-3 m)."""
    def __init__(self, weight_kg: float, height_m: float):
        super().__init__(
            "Weight and height produce a BMI outside the representable range",
            "BMI_OUT_OF_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.weight_kg = weight_kg
        self.height_m = height_m
