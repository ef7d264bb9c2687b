"""
CV Tailor API - FastAPI Application

Relays a CV and a job description to Gemini or OpenAI and returns the
tailored CV.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env file at startup
from dotenv import load_dotenv
load_dotenv()

from shared.ai import GeminiAdapter, OpenAIAdapter, TailorError, TailorHandler
from shared.ai.errors import PROVIDER_ERROR_MESSAGE
from shared.schemas.tailor import ModelProvider
from .config import APIConfig, get_config, log_provider_key_status
from .middleware import OriginAllowListMiddleware
from .routes import health_router, tailor_router

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = (
    "Invalid request body: expected a JSON object with string fields "
    "cv_text, job_description and selected_model."
)


def build_tailor_handler(config: APIConfig) -> TailorHandler:
    """Create the long-lived provider adapters and the handler that routes to them."""
    adapters = {
        ModelProvider.GEMINI: GeminiAdapter(
            api_key=config.gemini_api_key,
            model=config.gemini_model,
            output_format=config.output_format,
        ),
        ModelProvider.OPENAI: OpenAIAdapter(
            api_key=config.openai_api_key,
            model=config.openai_model,
            output_format=config.output_format,
            base_url=config.openai_base_url,
        ),
    }
    return TailorHandler(
        adapters,
        output_format=config.output_format,
        provider_timeout=config.provider_timeout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config = app.state.config
    logger.info("=" * 60)
    logger.info("CV TAILOR API STARTING")
    logger.info(f"Host: {config.host}")
    logger.info(f"Port: {config.port}")
    logger.info(f"PORT env var: {os.environ.get('PORT', 'not set')}")
    logger.info(f"Backend API endpoint: http://localhost:{config.port}/api/tailor")
    logger.info(f"Output format: {config.output_format.value}")
    logger.info(f"Allowed origins: {', '.join(config.allowed_origins)}")
    logger.info("=" * 60)
    log_provider_key_status()

    yield

    logger.info("Shutting down CV Tailor API...")


async def tailor_error_handler(request: Request, exc: TailorError):
    """Render tailoring failures as {"error": message}."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors with the same envelope as every other failure."""
    logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": INVALID_BODY_MESSAGE})


async def unhandled_error_handler(request: Request, exc: Exception):
    """Anything that escapes the tailoring handler still gets the generic envelope."""
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": PROVIDER_ERROR_MESSAGE})


def create_app(
    config: Optional[APIConfig] = None,
    tailor_handler: Optional[TailorHandler] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or get_config()

    app = FastAPI(
        title="CV Tailor API",
        description="Tailors a CV to a job description using Gemini or OpenAI",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.tailor_handler = tailor_handler or build_tailor_handler(config)

    app.add_exception_handler(TailorError, tailor_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # CORS headers for allow-listed origins; only POST is allowed cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_methods=["POST"],
        allow_headers=["*"],
    )
    # Added last so it runs first and unknown origins never reach a route
    app.add_middleware(OriginAllowListMiddleware, allowed_origins=config.allowed_origins)

    app.include_router(health_router)
    app.include_router(tailor_router, prefix="/api")

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = get_config()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "services.api.app:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )
