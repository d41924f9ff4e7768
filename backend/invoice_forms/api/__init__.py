"""API Layer — FastAPI routes and error handlers for the form engine.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Failing field rules are data (200 + errors); only faults use error statuses

Design Decisions:
    - Thin routes delegate to services/form_session.py
"""
