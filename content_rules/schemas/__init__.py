"""Pydantic Schemas - validation of untrusted input at the caller boundary.

Invariants:
    - Schemas check types and shapes; business rules stay in core.validation
    - Domain enums from core/ used for enum fields
"""
