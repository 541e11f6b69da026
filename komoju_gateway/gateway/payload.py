"""Request body builders for the Komoju REST API.

Every builder returns a plain ``dict`` ready to be JSON-encoded. Key order
is fixed so logged payloads and recorded fixtures stay stable.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from komoju_gateway.gateway.constants import CREDIT_CARD_TYPE, TOKEN_PREFIX
from shared.contracts import CreditCard, FraudDetails, GatewayOptions, PaymentField


def card_details(card: CreditCard, options: GatewayOptions) -> dict[str, Any]:
    details: dict[str, Any] = {
        "type": CREDIT_CARD_TYPE,
        "number": card.number,
        "month": card.month,
        "year": card.year,
        "verification_value": card.verification_value,
        "given_name": card.first_name,
        "family_name": card.last_name,
    }
    if options.email:
        details["email"] = options.email
    return details


def payment_field_for(payment: Any) -> PaymentField:
    if isinstance(payment, str) and not payment.startswith(TOKEN_PREFIX):
        return PaymentField.CUSTOMER
    return PaymentField.PAYMENT_DETAILS


def add_payment_details(post: dict[str, Any], payment: Any, options: GatewayOptions) -> None:
    """Place ``payment`` in ``post`` under the field the provider expects.

    * ``CreditCard`` expands to a ``credit_card`` details object.
    * A ``tok_`` string is a stored token and goes to ``payment_details``;
      any other string is a customer id and goes to ``customer``.
    * Anything else is a pre-built details payload and is sent unchanged.
    """
    field = payment_field_for(payment)
    if isinstance(payment, CreditCard):
        post[field.value] = card_details(payment, options)
    elif isinstance(payment, Mapping):
        post[field.value] = dict(payment)
    else:
        post[field.value] = payment


def add_fraud_details(post: dict[str, Any], options: GatewayOptions) -> None:
    details = FraudDetails.from_options(options)
    if not details.is_empty():
        post["fraud_details"] = details.model_dump(exclude_none=True)


def build_purchase_payload(
    money: int, payment: Any, options: GatewayOptions, *, default_currency: str
) -> dict[str, Any]:
    post: dict[str, Any] = {"amount": money}
    if options.locale is not None:
        post["locale"] = options.locale
    if options.description is not None:
        post["description"] = options.description
    add_payment_details(post, payment, options)
    post["currency"] = options.currency or default_currency
    if options.order_id is not None:
        post["external_order_num"] = options.order_id
    if options.tax is not None:
        post["tax"] = options.tax
    add_fraud_details(post, options)
    return post


def build_refund_payload(money: int) -> dict[str, Any]:
    # a zero refund is sent with no amount, which the provider treats as a void
    if money == 0:
        return {}
    return {"amount": money}


def build_store_payload(payment: Any, options: GatewayOptions) -> dict[str, Any]:
    post: dict[str, Any] = {}
    add_payment_details(post, payment, options)
    if options.customer_profile:
        post["email"] = options.email
    return post


def build_continue_payload(payment_details: Any, options: GatewayOptions) -> dict[str, Any]:
    if isinstance(payment_details, CreditCard):
        return {"payment_details": card_details(payment_details, options)}
    if isinstance(payment_details, Mapping):
        return {"payment_details": dict(payment_details)}
    return {"payment_details": payment_details}
