"""Prometheus metrics for token API endpoints."""

from prometheus_client import Counter

from .models import TokenOperation

# Token requests counter - tracks requests by operation and outcome
tokens_requests_total = Counter(
    "tokens_requests_total",
    "Total number of token API requests",
    labelnames=[
        "operation",
        "status",
    ],
)


def record_token_request(operation: TokenOperation, status: str) -> None:
    """Record a token API request.

    Args:
        operation: The token operation that was requested
        status: Outcome of the request (success, invalid)
    """
    tokens_requests_total.labels(operation=operation.value, status=status).inc()
