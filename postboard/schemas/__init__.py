"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - JSON field names are camelCase (alias_generator=to_camel)
    - Schemas are API contracts; models are persistence
"""
