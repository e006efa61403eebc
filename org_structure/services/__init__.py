"""Services Layer — tree store adapter, hierarchy engine, employee attachment.

Invariants:
    - Services own IO; the rules they apply come from core/
    - Services never commit outside DepartmentStore.transaction()

Design Decisions:
    - One class per concern, wired per request by the routes
"""
