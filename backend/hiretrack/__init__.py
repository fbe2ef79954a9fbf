"""HireTrack Application Package — recruitment dashboard over a synthetic dataset.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
