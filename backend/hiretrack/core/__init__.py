"""Core Layer — pure domain logic, no IO, no async, no network.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Every function is deterministic given a seeded RandomnessProvider

Design Decisions:
    - Functional core separated from imperative shell: routes and services
      compose these functions, they never re-implement filtering or counting
"""
