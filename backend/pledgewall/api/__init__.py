"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses; errors use one flat envelope

Design Decisions:
    - Thin routes delegate to services/pledge_service.py
"""
