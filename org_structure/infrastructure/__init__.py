"""Infrastructure Layer — database sessions and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain rules (errors excepted)
    - All storage failures mapped to DatabaseError

Design Decisions:
    - Resilient wrappers over raw clients (ADR: single responsibility)
"""
