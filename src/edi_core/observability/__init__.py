"""
Observability module for the EDI mock response service.
Provides metrics capabilities.
"""

from edi_core.observability.metrics import (
    get_metrics_endpoint,
    metrics_registry,
    record_artifacts,
    record_http_request,
    record_transaction,
)

__all__ = [
    "metrics_registry",
    "record_transaction",
    "record_artifacts",
    "record_http_request",
    "get_metrics_endpoint",
]
