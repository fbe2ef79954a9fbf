"""Pydantic Schemas — request filters and response shapes for the HTTP shell.

Invariants:
    - Schemas validate at the system boundary (query parameters, responses)
    - Domain enums from core/ are used for every status/type/category field
"""
