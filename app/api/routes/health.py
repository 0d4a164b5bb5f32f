from datetime import datetime, timezone

from fastapi import APIRouter

from app.domain.scoring_operations import ScoringOperations

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Full health check endpoint.

    Runs the engine on an empty collection to confirm it is importable
    and answering.

    Returns:
        dict: Health status with timestamp and engine check
    """
    try:
        ScoringOperations.compute_scores([], 0.0)
        engine_status = "ok"
    except Exception as e:
        engine_status = f"error: {str(e)}"

    return {
        "status": "healthy" if engine_status == "ok" else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "engine": engine_status
        }
    }


@router.get("/healthz")
async def healthz():
    """
    Simple liveness probe.

    Returns:
        dict: Simple status indicator
    """
    return {"status": "healthy"}


@router.get("/ping")
async def ping():
    """Smoke test for host communication."""
    return {"message": ScoringOperations.ping()}


@router.get("/version")
async def version():
    """Engine version string."""
    return {"version": ScoringOperations.version()}
