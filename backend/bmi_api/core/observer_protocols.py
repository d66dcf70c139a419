"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Observability reached only through CalculationObserver
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Sync methods: events are fire-and-forget diagnostics, no IO awaited
"""

from typing import Protocol

from bmi_api.core.domain_types import BmiCategory


class CalculationObserver(Protocol):
    """Receives structured events at the three points of a calculation."""

    def calculation_requested(self, weight_kg: float, height_m: float) -> None: ...

    def validation_failed(self, weight_kg: float, height_m: float) -> None: ...

    def calculation_succeeded(self, bmi: float, category: BmiCategory) -> None: ...
