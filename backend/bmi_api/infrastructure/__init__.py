"""Infrastructure Layer — cross-cutting concerns wired in by the shell.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
"""
