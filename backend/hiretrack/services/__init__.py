"""Services Layer — the read-only query surface consumed by the presentation layer.

Invariants:
    - Services compose core functions; they hold no business rules of their own
    - Every query logs its result count
"""
