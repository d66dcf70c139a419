"""BMI API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BmiError → plain-text 400 responses
    - CORS configured from settings (permissive by default)
    - Logging initialized once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() wraps uvicorn so the console script and `python -m bmi_api`
      share one bind path
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bmi_api import __version__
from bmi_api.api.error_handlers import register_error_handlers
from bmi_api.api.routes import calculate, health, pages
from bmi_api.config import get_settings
from bmi_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    address = f"{settings.host}:{settings.port}"
    logger.info(
        f"Starting BMI Calculator application on {address}",
        extra={"event": "app.startup.initiated", "address": address},
    )
    yield
    logger.info("BMI API shutting down", extra={"event": "app.shutdown"})


app = FastAPI(title="BMI API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages.router)
app.include_router(health.router)
app.include_router(calculate.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app on settings.host:settings.port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
