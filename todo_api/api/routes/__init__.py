"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter
    - Routes never hold the store lock; they call one store method per request
"""
