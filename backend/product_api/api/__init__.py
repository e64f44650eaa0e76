"""API Layer — FastAPI routes, validation gate, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies

Design Decisions:
    - Thin routes: validation in core/validation.py, persistence behind ProductRepository
"""
