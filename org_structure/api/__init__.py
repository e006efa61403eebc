"""API Layer — FastAPI routes, error handlers and request logging.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (204 excepted)

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
