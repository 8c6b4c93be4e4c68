from fastapi import APIRouter, HTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_507_INSUFFICIENT_STORAGE,
)

from basicstats import config
from basicstats.api.schemas import StatsIn, StatsOut
from basicstats.observability.metrics import COMPUTATION_COUNT, SAMPLE_SIZE
from basicstats.services.basicstats import compute_stats
from basicstats.services.errors import AllocationFailure, ConfigurationError, StatsError

router = APIRouter()

@router.post("/stats", response_model=StatsOut)
async def analyze(body: StatsIn):
    """
    Accepts a JSON payload with 'numbers'.
    Returns count, mean, median, mode, population stddev and harmonic mean.
    Responds with 400 Bad Request when a statistic is undefined for the input
    (e.g. a zero value for the harmonic mean) or overflows to a non-finite value,
    507 when the sample buffer cannot grow and 500 when the service is misconfigured.
    """
    SAMPLE_SIZE.observe(len(body.numbers))
    try:
        report = compute_stats(body.numbers, max_capacity=config.max_capacity())
    except ConfigurationError as exc:
        COMPUTATION_COUNT.labels(type(exc).__name__).inc()
        raise HTTPException(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    except AllocationFailure as exc:
        COMPUTATION_COUNT.labels(type(exc).__name__).inc()
        raise HTTPException(status_code=HTTP_507_INSUFFICIENT_STORAGE, detail=str(exc)) from exc
    except StatsError as exc:
        COMPUTATION_COUNT.labels(type(exc).__name__).inc()
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    # JSON has no form for inf/nan; sums of large finite inputs can still overflow
    overflowed = report.non_finite_fields()
    if overflowed:
        COMPUTATION_COUNT.labels("overflow").inc()
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail=f"result is not finite: {', '.join(overflowed)}",
        )
    COMPUTATION_COUNT.labels("ok").inc()
    return StatsOut(**report.as_dict())
