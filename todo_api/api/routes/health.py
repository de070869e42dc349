"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /healthz always returns 200 with an empty body if the process is up
"""

from fastapi import APIRouter, Response, status

router = APIRouter(tags=["health"])


@router.get("/healthz", response_class=Response)
def healthz() -> Response:
    """Liveness check."""
    return Response(status_code=status.HTTP_200_OK)
