"""Core: error hierarchy and persistence contracts.

Invariants:
    - Core never imports from infrastructure/ or api/
"""
