"""
Prometheus metrics for the EDI mock response service.
Focus on business metrics and Golden Signals.
"""

from typing import Iterable, Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from edi_core.models.classification import TransactionType

# Create a custom registry for our metrics
metrics_registry = CollectorRegistry()

# ====== BUSINESS METRICS ======

# Requests by transaction type and terminal state
edi_transactions_total = Counter(
    "edi_transactions_total",
    "Total EDI transactions by terminal state",
    ["transaction_type", "outcome"],  # composed, rejected, suppressed, failed
    registry=metrics_registry,
)

# Artifacts handed back to callers
edi_artifacts_total = Counter(
    "edi_artifacts_total",
    "Total response artifacts produced",
    ["transaction_type", "success"],
    registry=metrics_registry,
)

# ====== GOLDEN SIGNALS ======

# 1. TRAFFIC - Request rate
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
    registry=metrics_registry,
)

# 2. LATENCY - Response time distribution
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
    registry=metrics_registry,
)

# 3. ERRORS - Error rate by HTTP status class
http_requests_2xx_total = Counter(
    "http_requests_2xx_total",
    "Total 2xx HTTP responses",
    ["method", "endpoint"],
    registry=metrics_registry,
)

http_requests_4xx_total = Counter(
    "http_requests_4xx_total",
    "Total 4xx HTTP responses",
    ["method", "endpoint"],
    registry=metrics_registry,
)

http_requests_5xx_total = Counter(
    "http_requests_5xx_total",
    "Total 5xx HTTP responses",
    ["method", "endpoint"],
    registry=metrics_registry,
)


UNKNOWN_LABEL = "UNKNOWN"


def _label(transaction_type: Optional[str]) -> str:
    """Unrecognized transaction types share the UNKNOWN series."""
    transaction = TransactionType.parse(transaction_type)
    return transaction.value if transaction is not None else UNKNOWN_LABEL


# ====== BUSINESS METRIC FUNCTIONS ======


def record_transaction(transaction_type: Optional[str], outcome: str) -> None:
    """Record a request reaching a terminal state."""
    edi_transactions_total.labels(
        transaction_type=_label(transaction_type), outcome=outcome
    ).inc()


def record_artifacts(transaction_type: Optional[str], artifacts: Iterable) -> None:
    """Record each produced artifact by success flag."""
    for artifact in artifacts:
        edi_artifacts_total.labels(
            transaction_type=_label(transaction_type),
            success=str(artifact.success).lower(),
        ).inc()


# ====== GOLDEN SIGNALS FUNCTIONS ======


def record_http_request(
    method: str, endpoint: str, status_code: int, duration: float
) -> None:
    """Record HTTP request metrics with golden signals."""
    # Traffic
    http_requests_total.labels(
        method=method, endpoint=endpoint, status_code=str(status_code)
    ).inc()

    # Latency
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )

    # Errors by status code class
    if 200 <= status_code < 300:
        http_requests_2xx_total.labels(method=method, endpoint=endpoint).inc()
    elif 400 <= status_code < 500:
        http_requests_4xx_total.labels(method=method, endpoint=endpoint).inc()
    elif 500 <= status_code < 600:
        http_requests_5xx_total.labels(method=method, endpoint=endpoint).inc()


def get_metrics_endpoint() -> tuple:
    """Get metrics for Prometheus scraping."""
    return generate_latest(metrics_registry), CONTENT_TYPE_LATEST
