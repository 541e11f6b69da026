from __future__ import annotations

from shared.contracts import CardBrand

GATEWAY_VERSION = "0.1.0"

TEST_URL = "https://sandbox.komoju.com/api/v1"
LIVE_URL = "https://komoju.com/api/v1"

DISPLAY_NAME = "Komoju"
HOMEPAGE_URL = "https://www.komoju.com/"
SUPPORTED_COUNTRIES: tuple[str, ...] = ("JP",)
SUPPORTED_CARD_TYPES: tuple[CardBrand, ...] = (
    CardBrand.VISA,
    CardBrand.MASTER,
    CardBrand.AMERICAN_EXPRESS,
    CardBrand.JCB,
)
DEFAULT_CURRENCY = "JPY"
MONEY_FORMAT = "cents"

USER_AGENT = f"Komoju/v1 KomojuGatewayBindings/{GATEWAY_VERSION}"

TOKEN_PREFIX = "tok_"
CREDIT_CARD_TYPE = "credit_card"
SUCCESS_MESSAGE = "Transaction succeeded"
GATEWAY_TIMEOUT_CODE = "gateway_timeout"
GATEWAY_TIMEOUT_STATUS = 504

STANDARD_ERROR_CODE_MAPPING: dict[str, str] = {
    "bad_verification_value": "incorrect_cvc",
    "card_expired": "expired_card",
    "card_declined": "card_declined",
    "invalid_number": "invalid_number",
}


def normalize_error_code(code: str | None) -> str | None:
    if code is None:
        return None
    return STANDARD_ERROR_CODE_MAPPING.get(code, code)


def payments_path() -> str:
    return "/payments"


def payment_path(payment_id: str) -> str:
    return f"/payments/{payment_id}"


def refund_path(payment_id: str) -> str:
    return f"/payments/{payment_id}/refund"


def customers_path() -> str:
    return "/customers"


def tokens_path() -> str:
    return "/tokens"
