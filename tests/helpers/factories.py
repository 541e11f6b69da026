from __future__ import annotations

from typing import Any

from komoju_gateway.gateway.adapter import GatewayConfig
from shared.contracts import CreditCard, GatewayEnvironment


def make_credit_card(
    *,
    number: str = "4242424242424242",
    month: int = 12,
    year: int = 2030,
    verification_value: str | None = "123",
    first_name: str = "Jane",
    last_name: str = "Doe",
) -> CreditCard:
    return CreditCard(
        number=number,
        month=month,
        year=year,
        verification_value=verification_value,
        first_name=first_name,
        last_name=last_name,
    )


def make_gateway_config(
    *,
    login: str = "sk_test_login",
    environment: GatewayEnvironment = GatewayEnvironment.SANDBOX,
    default_currency: str = "JPY",
    locale: str | None = None,
) -> GatewayConfig:
    return GatewayConfig(
        login=login,
        environment=environment,
        default_currency=default_currency,
        locale=locale,
    )


def make_payment_response(
    *, payment_id: str = "pay_1a2b3c", status: str = "captured", amount: int = 1000
) -> dict[str, Any]:
    return {
        "id": payment_id,
        "resource": "payment",
        "status": status,
        "amount": amount,
        "currency": "JPY",
        "payment_details": {"type": "credit_card", "last_four_digits": "4242"},
    }


def make_error_response(*, code: str, message: str) -> dict[str, Any]:
    return {"error": {"code": code, "message": message, "param": None}}
