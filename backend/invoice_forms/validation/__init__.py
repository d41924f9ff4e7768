"""Validation Layer — per-form rule engine (blur state, messages, rules, registry).

Invariants:
    - Nothing here is process-wide: every object belongs to one form session
    - Validation outcomes are returned as ErrorLists, never raised
    - Only configuration faults (missing messages, lookup failures, timeouts) raise

Design Decisions:
    - Async rule shape (value -> awaitable ErrorList) for every rule, synchronous
      checks included, so one registry runs them all
"""
