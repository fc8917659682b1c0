"""Core Layer - pure domain logic, no IO, no persistence.

Invariants:
    - No module in core/ imports from infrastructure/, schemas/, or config
    - All functions are deterministic; only VersionedContent holds mutable state

Design Decisions:
    - Functional core separated from the caller's imperative shell
"""
