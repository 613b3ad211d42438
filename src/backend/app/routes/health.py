"""
Health check endpoint handler.
"""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """
    Health check endpoint for monitoring.
    Reports whether the request store is loaded and how many records it holds.
    """
    health_status = {
        "status": "healthy",
        "services": {},
    }

    repository = getattr(request.app.state, "maintenance_repository", None)
    if repository is None:
        health_status["services"]["request_store"] = {"status": "unavailable"}
        health_status["status"] = "degraded"
    else:
        health_status["services"]["request_store"] = {
            "status": "healthy",
            "records": len(repository),
        }

    return health_status
