"""Infrastructure Layer — cross-cutting process concerns (logging).

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
