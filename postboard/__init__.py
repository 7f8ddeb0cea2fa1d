"""Postboard: minimal users & posts API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
