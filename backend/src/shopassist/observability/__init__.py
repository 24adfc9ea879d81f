"""Observability module for the shop assistant.

Provides structured logging, metrics, request correlation and health checks.
"""

from .logging_config import configure_logging, get_logger
from .metrics import (
    provider_calls_total,
    provider_latency_ms,
    search_requests_total,
    search_duration_seconds,
    search_result_count,
    tool_invocations_total,
)
from .request_id import request_id_var, current_request_id, bind_request_id, reset_request_id
from .middleware import RequestIDMiddleware

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Metrics
    "provider_calls_total",
    "provider_latency_ms",
    "search_requests_total",
    "search_duration_seconds",
    "search_result_count",
    "tool_invocations_total",
    # Request ID
    "request_id_var",
    "current_request_id",
    "bind_request_id",
    "reset_request_id",
    # Middleware
    "RequestIDMiddleware",
]
