"""Error Handlers — global exception handlers for the BMI API.

Invariants:
    - BmiError → plain-text body with the fixed user-facing message (400)
    - RequestValidationError (malformed JSON, missing fields, wrong types) →
      400 MALFORMED_INPUT, before the handler's guard ever runs
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Plain text for domain errors: the page script renders response.text()
      verbatim as the error message
    - Malformed input mapped to 400 (not FastAPI's default 422): both failure
      modes share the same client-error status
    - Detail fields named as the client sent them (height_m, not body.height_m)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from bmi_api.core.errors import BmiError

logger = logging.getLogger(__name__)

MALFORMED_INPUT_MESSAGE = (
    "Request body must be a JSON object with numeric weight_kg and height_m"
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bmi_error_handler(app)
    _register_malformed_input_handler(app)
    _register_generic_error_handler(app)


def _register_bmi_error_handler(app: FastAPI) -> None:
    """Register BMI domain error handler."""

    @app.exception_handler(BmiError)
    async def bmi_error_handler(request: Request, exc: BmiError):
        logger.warning(
            f"BmiError: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_malformed_input_handler(app: FastAPI) -> None:
    """Register handler for bodies that do not deserialize into BmiRequest."""

    @app.exception_handler(RequestValidationError)
    async def malformed_input_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = [_describe_problem(e) for e in exc.errors()]
        logger.warning(
            f"Malformed input on {request.url.path}: "
            f"{', '.join(d['field'] for d in details)}",
            extra={"error_code": "MALFORMED_INPUT", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": {
                    "code": "MALFORMED_INPUT",
                    "message": MALFORMED_INPUT_MESSAGE,
                    "details": details,
                },
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                },
            },
        )


def _describe_problem(error: dict) -> dict:
    """One pydantic error → {field, problem, type}.

    ("body", "height_m") → "height_m"; a JSON decode error located at
    ("body", <offset>) has no field and is reported as "body".
    """
    names = [part for part in error["loc"][1:] if isinstance(part, str)]
    return {
        "field": ".".join(names) or "body",
        "problem": error["msg"],
        "type": error["type"],
    }
