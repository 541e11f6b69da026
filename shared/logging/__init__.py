from shared.logging.fields import (
    CARD_BRAND,
    ENVIRONMENT,
    ERROR_CODE,
    HTTP_METHOD,
    OPERATION,
    ORDER_ID,
    OUTCOME,
    PATH,
    PAYMENT_ID,
    STATUS_CODE,
    TRACE_ID,
)
from shared.logging.logger import (
    JsonFormatter,
    configure_logging,
    correlation_scope,
    get_correlation_context,
    get_logger,
)

__all__ = [
    "CARD_BRAND",
    "ENVIRONMENT",
    "ERROR_CODE",
    "HTTP_METHOD",
    "JsonFormatter",
    "OPERATION",
    "ORDER_ID",
    "OUTCOME",
    "PATH",
    "PAYMENT_ID",
    "STATUS_CODE",
    "TRACE_ID",
    "configure_logging",
    "correlation_scope",
    "get_correlation_context",
    "get_logger",
]
