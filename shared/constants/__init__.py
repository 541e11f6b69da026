from shared.constants.messages import (
    DEFAULT_LOCALE,
    PAYMENT_PROCESSING_FAILED,
    supported_locales,
    translate,
)

__all__ = [
    "DEFAULT_LOCALE",
    "PAYMENT_PROCESSING_FAILED",
    "supported_locales",
    "translate",
]
