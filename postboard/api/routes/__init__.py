"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes hold no query logic (delegate to repositories)
"""
