"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - SQLAlchemy exceptions never leave this package unmapped
"""
