"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization from explicit Settings
2. Router registration
3. Middleware configuration (audit logging, CORS)
4. Exception handlers rendering every failure as the error envelope
5. Startup/shutdown logging

Run with: uvicorn qualifier.api.main:app --reload
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from qualifier import __version__
from qualifier.core.audit import AuditMiddleware
from qualifier.core.config import Settings, get_settings
from qualifier.core.exceptions import InternalError, InvalidRequest, QualifierException
from qualifier.core.logging_config import get_logger, setup_logging
from qualifier.api.routes import bfhl_router, health_router
from qualifier.llm.client import LLMClient
from qualifier.services.dispatcher import OperationDispatcher, QuestionAnswerer

logger = get_logger(__name__)


def _official_email(request: Request) -> str:
    return request.app.state.settings.official_email


def create_app(
    settings: Optional[Settings] = None,
    ai_client: Optional[QuestionAnswerer] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted
        ai_client: AI collaborator; a Gemini LLMClient when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Configure logging on startup; log startup and shutdown."""
        setup_logging(settings.log_level, settings.log_dir)
        logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
        logger.info(f"LLM Model: {settings.llm_model}")
        logger.info(f"Audit Logging: {settings.enable_audit_logging}")
        if not settings.official_email:
            logger.warning("OFFICIAL_EMAIL is not set; envelopes will carry an empty email")

        yield  # Application runs here

        logger.info(f"Shutting down {settings.app_name}")

    app = FastAPI(
        title="BFHL Qualifier API",
        description="""
        A single operation endpoint plus a health check.

        ## Operations

        - **fibonacci**: first n Fibonacci numbers
        - **prime**: prime filter
        - **lcm** / **hcf**: least common multiple / highest common factor
        - **AI**: short answers from Google Gemini
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.dispatcher = OperationDispatcher(
        ai_client=ai_client or LLMClient(settings)
    )

    # ============================================================
    # Middleware Configuration
    # ============================================================

    if settings.enable_audit_logging:
        app.add_middleware(AuditMiddleware)
        logger.info("Audit logging middleware enabled")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ============================================================
    # Exception Handlers
    # ============================================================

    @app.exception_handler(QualifierException)
    async def qualifier_exception_handler(request: Request, exc: QualifierException):
        """Render any classified failure as the error envelope."""
        logger.info(
            f"Responding {exc.status_code} to {request.method} {request.url.path}: "
            f"kind={exc.kind.value}, field={getattr(exc, 'field', None) or '-'}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_envelope(_official_email(request))
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON bodies are invalid requests."""
        logger.warning(f"Rejected request body: {exc.errors()}")
        error = InvalidRequest("Request body must be a JSON object")
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_envelope(_official_email(request))
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions globally.

        The cause is logged; the caller only sees the generic message.
        """
        logger.exception(f"Unhandled exception: {exc}")
        error = InternalError()
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_envelope(_official_email(request))
        )

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(health_router)
    app.include_router(bfhl_router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Point at the documentation."""
        return {
            "message": "BFHL Qualifier API",
            "version": __version__,
            "documentation": "/docs",
            "health": "/health"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "qualifier.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development()
    )
