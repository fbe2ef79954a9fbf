"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes only translate HTTP ⇄ RecruitmentQueries; no filtering or counting here
"""
