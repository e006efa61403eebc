"""Core Layer — pure hierarchy rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Core never logs: observability belongs to the shell

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
