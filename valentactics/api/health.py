"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Return application and AI provider status."""
    service = getattr(request.app.state, "analysis_service", None)
    if service is None:
        return {"status": "error", "provider": "uninitialized"}
    return {
        "status": "ok",
        "provider": service.ai.name,
        "remote_analysis": "enabled" if service.remote_enabled else "disabled",
    }
