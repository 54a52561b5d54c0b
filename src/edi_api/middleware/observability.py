"""
FastAPI middleware for automatic observability.
Captures HTTP metrics and tags log records with a request id.
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from edi_core.logging import request_context
from edi_core.observability import get_metrics_endpoint, record_http_request

REQUEST_ID_HEADER = "X-Request-ID"


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Middleware to automatically capture HTTP metrics and logs."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Generate or extract request_id for tracing
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()
        # Unhandled faults escape call_next and are answered by the server error handler
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            with request_context(request_id):
                response = await call_next(request)
            status_code = response.status_code
        finally:
            record_http_request(
                method=request.method,
                endpoint=request.url.path,
                status_code=status_code,
                duration=time.time() - start_time,
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def add_observability_middleware(app: FastAPI) -> None:
    """Add observability middleware to FastAPI app."""
    app.add_middleware(ObservabilityMiddleware)


def add_metrics_endpoint(app: FastAPI) -> None:
    """Add metrics endpoint for Prometheus scraping."""

    @app.get("/metrics", include_in_schema=False)
    async def metrics():
        """Prometheus metrics endpoint."""
        content, content_type = get_metrics_endpoint()
        return Response(content=content, media_type=content_type)
