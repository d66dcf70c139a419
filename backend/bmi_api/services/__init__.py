"""Services Layer — request handlers that orchestrate the pure core.

Invariants:
    - Handlers hold no per-request state (safe to share across requests)
    - Side effects reach the outside world only through injected collaborators
"""
