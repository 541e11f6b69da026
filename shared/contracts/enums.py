from __future__ import annotations

from enum import Enum


class GatewayEnvironment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


class HttpMethod(str, Enum):
    POST = "POST"
    PATCH = "PATCH"


class CardBrand(str, Enum):
    VISA = "visa"
    MASTER = "master"
    AMERICAN_EXPRESS = "american_express"
    JCB = "jcb"


class PaymentField(str, Enum):
    PAYMENT_DETAILS = "payment_details"
    CUSTOMER = "customer"


class ErrorCategory(str, Enum):
    INVALID_REQUEST = "invalid_request"
    MISSING_CREDENTIALS = "missing_credentials"
    PROVIDER_TIMEOUT = "provider_timeout"
    PROVIDER_CONNECTION = "provider_connection"
    PROVIDER_RESPONSE_PARSE = "provider_response_parse"
