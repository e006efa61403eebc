"""Database Metadata — SQLAlchemy Base shared by models and migrations.

Invariants:
    - Models register on Base.metadata at import time (see models/__init__.py)
"""
