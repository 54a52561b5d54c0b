"""
FastAPI application main module.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from loguru import logger

import edi_core.logging  # noqa: F401  Ensure logging is configured
from edi_api.application import EdiApplicationService
from edi_api.config.settings import Settings, settings
from edi_api.controllers.edi_controller import router as edi_router
from edi_api.controllers.health_controller import router as health_router
from edi_api.middleware import add_metrics_endpoint, add_observability_middleware
from edi_api.utils.error_utils import (
    handle_malformed_request,
    handle_processing_failure,
    handle_unexpected_error,
)
from edi_core.config import config
from edi_core.exceptions import MalformedRequestError, ProcessingFailure
from edi_core.processor import create_request_processor
from edi_core.services.content import ContentResolver

MALFORMED_BODY_MESSAGE = "Malformed request body"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Starting EDI Processor API...")
    logger.info(
        f"Content store ready with {len(app.state.content_resolver)} entries"
    )

    yield

    logger.info("EDI Processor API shutdown complete")


def create_app(
    content_resolver: Optional[ContentResolver] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create the FastAPI application and its processing stack."""
    app_settings = app_settings or settings
    if content_resolver is None:
        content_resolver = ContentResolver.from_file(
            config.content.content_file, config.content.default_content
        )

    app = FastAPI(
        title=app_settings.api_title,
        description=app_settings.api_description,
        version=app_settings.api_version,
        lifespan=lifespan,
        debug=app_settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Built once; read-only for the lifetime of the process
    app.state.content_resolver = content_resolver
    app.state.edi_service = EdiApplicationService(
        create_request_processor(content_resolver),
        legacy_status_codes=app_settings.legacy_status_codes,
    )

    add_observability_middleware(app)
    add_metrics_endpoint(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.get_cors_origins(),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    if app_settings.is_production():
        app.add_middleware(
            TrustedHostMiddleware, allowed_hosts=app_settings.get_allowed_hosts()
        )
        logger.info(
            f"Production security middleware enabled: trusted hosts {app_settings.get_allowed_hosts()}"
        )

    app.include_router(edi_router)
    app.include_router(health_router)

    @app.exception_handler(MalformedRequestError)
    async def malformed_request_handler(request: Request, exc: MalformedRequestError):
        logger.warning(
            f"Malformed request on {request.url.path}: {exc} {exc.details}"
        )
        return handle_malformed_request(exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_binding_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Request body could not be bound on {request.url.path}: {exc}")
        return handle_malformed_request(MALFORMED_BODY_MESSAGE)

    @app.exception_handler(ProcessingFailure)
    async def processing_failure_handler(request: Request, exc: ProcessingFailure):
        logger.error(f"EDI processing failure for UUID {exc.uuid}: {exc} {exc.details}")
        return handle_processing_failure(exc, app_settings.legacy_status_codes)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception in {request.url.path}: {exc}")
        return handle_unexpected_error()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "edi_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="info",
    )
