"""Health & Readiness Probes — liveness and dataset readiness.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the dataset context exists
    - Once ready it reports the counts and whether applicants are memoized
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": "hiretrack-api", "version": "1.0.0"}


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — the dataset must have been generated."""
    queries = getattr(request.app.state, "queries", None)
    if queries is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "dataset_unavailable"},
        )
    store = queries.store
    return {
        "status": "ready",
        "checks": {"dataset": "generated"},
        "applicants": "memoized" if queries.context.resolver.memoize else "per_request",
        "jobs": len(store.jobs),
        "reports": len(store.reports),
        "generated_at": queries.context.generated_at.isoformat(),
    }
