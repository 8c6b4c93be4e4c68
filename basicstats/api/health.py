from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from basicstats import config

router = APIRouter()

@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check; every request builds its own sample buffer, so answering is enough."""
    return {"status": "ok", "service": config.SERVICE_NAME, "version": config.SERVICE_VERSION}

@router.get("/ready")
async def ready(request: Request):
    """Readiness check backed by app.state.ready, which the lifespan handler toggles."""
    if getattr(request.app.state, "ready", False):
        return {"status": "ready"}
    return JSONResponse({"status": "not ready"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
