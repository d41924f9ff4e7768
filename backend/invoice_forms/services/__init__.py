"""Services Layer — composes the validation engine into per-form sessions.

Invariants:
    - Services hold no HTTP concerns; routes translate requests into service calls
    - Form definitions registered explicitly (no auto-discovery)
"""
