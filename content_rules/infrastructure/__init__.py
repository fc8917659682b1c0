"""Infrastructure Layer - side-effecting setup (logging).

Invariants:
    - Nothing in core/ depends on this package
"""
