"""Database Metadata — SQLAlchemy Base shared by models, migrations and tests.

Invariants:
    - Engine ownership lives in infrastructure/database.py, not here
"""
