from shared.contracts.dto import (
    CreditCard,
    FraudDetails,
    GatewayOptions,
    OperationResult,
    PaymentInstrument,
)
from shared.contracts.enums import (
    CardBrand,
    ErrorCategory,
    GatewayEnvironment,
    HttpMethod,
    PaymentField,
)

__all__ = [
    "CardBrand",
    "CreditCard",
    "ErrorCategory",
    "FraudDetails",
    "GatewayEnvironment",
    "GatewayOptions",
    "HttpMethod",
    "OperationResult",
    "PaymentField",
    "PaymentInstrument",
]
