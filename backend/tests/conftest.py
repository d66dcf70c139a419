"""Root conftest — shared test configuration and fixtures.

Invariants:
    - recording_observer swaps the logging observer via dependency_overrides
    - Overrides are cleared after every test that installs them
"""

import os

# Human-readable logs if a test triggers the lifespan
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient

from bmi_api.api.routes.calculate import get_calculation_handler
from bmi_api.main import app
from bmi_api.services.handle_calculate import BmiCalculationHandler


class RecordingObserver:
    """CalculationObserver double — records (event, payload) tuples in order."""

    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def calculation_requested(self, weight_kg, height_m):
        self.events.append(
            ("requested", {"weight_kg": weight_kg, "height_m": height_m}),
        )

    def validation_failed(self, weight_kg, height_m):
        self.events.append(
            ("validation_failed", {"weight_kg": weight_kg, "height_m": height_m}),
        )

    def calculation_succeeded(self, bmi, category):
        self.events.append(("succeeded", {"bmi": bmi, "category": category}))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def calculation_observer():
    """Fresh observer double, not wired into the app."""
    return RecordingObserver()


@pytest.fixture
def recording_observer(calculation_observer):
    """Route-level observer double; the handler under test reports here."""
    observer = calculation_observer
    app.dependency_overrides[get_calculation_handler] = (
        lambda: BmiCalculationHandler(observer)
    )
    yield observer
    app.dependency_overrides.clear()


@pytest.fixture
async def client():
    """FastAPI test client over ASGI transport (no network)."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
