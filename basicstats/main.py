import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from basicstats import config
from basicstats.api import health, stats
from basicstats.observability.logging import setup_logging
from basicstats.observability.metrics import MetricsMiddleware, metrics_router

logger = logging.getLogger(__name__)

@asynccontextmanager
async def app_lifespan(app: FastAPI):
    # /ready answers 200 only between startup and shutdown
    app.state.ready = True
    logger.info("%s %s ready", config.SERVICE_NAME, config.SERVICE_VERSION)
    try:
        yield
    finally:
        app.state.ready = False

def _jsonable(err):
    # pydantic puts the raised ValueError itself into ctx
    if isinstance(err, Exception):
        return str(err)
    if isinstance(err, dict):
        return {k: _jsonable(v) for k, v in err.items()}
    if isinstance(err, list):
        return [_jsonable(e) for e in err]
    return err

async def validation_error_as_400(request: Request, exc: RequestValidationError):
    # A malformed sample is a client error like a zero in the harmonic mean: always 400
    return JSONResponse(status_code=400, content={"detail": _jsonable(exc.errors())})

def create_app() -> FastAPI:
    setup_logging(config.log_level())
    app = FastAPI(
        title="Basic Statistics Service",
        version=config.SERVICE_VERSION,
        lifespan=app_lifespan,
    )
    app.state.ready = False
    app.add_middleware(MetricsMiddleware)
    app.include_router(metrics_router)
    app.include_router(health.router)
    app.include_router(stats.router)
    app.add_exception_handler(RequestValidationError, validation_error_as_400)
    return app

app = create_app()
