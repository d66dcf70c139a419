"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate SHAPE at the system boundary (types, required fields)
    - Domain rules (positivity, finiteness) live in core/, not here
"""
