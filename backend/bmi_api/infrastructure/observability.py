"""Structured Logging — JSON formatter, setup, and the logging CalculationObserver.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (event, weight_kg, height_m, bmi, category, error_code, path)
      surfaced when present
    - Every emitted line is valid JSON — non-finite floats rendered as strings
    - JSON format in production, human-readable in development

Design Decisions:
    - stdlib logging + JSONFormatter: zero dependencies, full control
    - setup_logging called once on startup via lifespan
    - Event names carried in an `event` extra field, dotted (bmi.calculation.success)
"""

import json
import logging
import math
from datetime import datetime, timezone

from bmi_api.core.domain_types import BmiCategory

logger = logging.getLogger(__name__)

EXTRA_FIELDS = (
    "event", "weight_kg", "height_m", "bmi", "category",
    "error_code", "error_category", "severity", "path", "address",
)


def _json_safe(value):
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = _json_safe(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure logging for the application. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


class LoggingCalculationObserver:
    """CalculationObserver that emits one structured log record per event."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def calculation_requested(self, weight_kg: float, height_m: float) -> None:
        self._log.info(
            f"BMI calculation requested: weight={weight_kg}kg, height={height_m}m",
            extra={
                "event": "bmi.calculation.started",
                "weight_kg": weight_kg, "height_m": height_m,
            },
        )

    def validation_failed(self, weight_kg: float, height_m: float) -> None:
        self._log.warning(
            "Invalid input: weight and height must be positive",
            extra={
                "event": "bmi.validation.failed",
                "weight_kg": weight_kg, "height_m": height_m,
            },
        )

    def calculation_succeeded(self, bmi: float, category: BmiCategory) -> None:
        self._log.info(
            f"BMI calculated: {bmi}, category: {category.value}",
            extra={
                "event": "bmi.calculation.success",
                "bmi": bmi, "category": category.value,
            },
        )
