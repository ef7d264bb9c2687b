"""
Health check endpoints for container orchestration.

/health/fast has no dependencies on the rest of the codebase so it responds
even if configuration is broken.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health/fast")
async def fast_health():
    """Minimal healthcheck - always returns 200."""
    return JSONResponse(content={"ok": True}, status_code=200)


@router.get("/health")
async def health_check(request: Request):
    """Full health check with provider status."""
    from datetime import datetime
    try:
        from ..config import get_gemini_api_key, get_openai_api_key
        gemini_key, gemini_source = get_gemini_api_key()
        openai_key, openai_source = get_openai_api_key()
        config = request.app.state.config
        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "service": "cv-tailor-api",
            "output_format": config.output_format.value,
            "gemini_key_loaded": gemini_key is not None,
            "gemini_env_source": gemini_source,
            "gemini_model": config.gemini_model,
            "openai_key_loaded": openai_key is not None,
            "openai_env_source": openai_source,
            "openai_model": config.openai_model,
        }
    except Exception as e:
        return {
            "status": "degraded",
            "error": str(e),
            "timestamp": datetime.utcnow().isoformat(),
        }
