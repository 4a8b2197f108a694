"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends, status
from starlette.responses import JSONResponse

from code_verifier.api.http.deps import get_database_service
from code_verifier.core.services import DbSessionService
from code_verifier.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health() -> dict[str, str]:
    """Liveness probe: returns 200 as long as the process is running."""
    return {"status": "healthy", "service": "code-verifier"}


@router.get("/ready", response_model=None)
def readiness(
    database_service: DbSessionService = Depends(get_database_service),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    config = get_config()
    db_healthy = database_service.health_check()

    body = {
        "status": "ready" if db_healthy else "not_ready",
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": config.database.url.split(":", 1)[0],
                "pool": database_service.get_pool_status(),
            }
        },
    }
    if not db_healthy:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
