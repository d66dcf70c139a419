"""BMI API Package — body mass index calculation service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
    - __version__ is the single source for the service version

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "1.0.0"
