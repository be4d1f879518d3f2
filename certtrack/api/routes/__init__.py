"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/ and core/)
    - Paths are declared without the /api prefix; middleware strips it
"""
