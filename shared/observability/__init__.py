from shared.observability.attributes import (
    ENVIRONMENT,
    ERROR_CODE,
    HTTP_METHOD,
    HTTP_ROUTE,
    HTTP_STATUS_CODE,
    OPERATION,
    OUTCOME,
    PAYMENT_ID,
    PROVIDER,
)
from shared.observability.otel import configure_otel, get_tracer
from shared.observability.propagation import current_trace_id, inject_headers

__all__ = [
    "ENVIRONMENT",
    "ERROR_CODE",
    "HTTP_METHOD",
    "HTTP_ROUTE",
    "HTTP_STATUS_CODE",
    "OPERATION",
    "OUTCOME",
    "PAYMENT_ID",
    "PROVIDER",
    "configure_otel",
    "current_trace_id",
    "get_tracer",
    "inject_headers",
]
