"""Database Infrastructure — SQLAlchemy declarative base.

Invariants:
    - All models inherit from Base (db/base.py)
"""
