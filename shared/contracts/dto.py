from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.contracts.enums import CardBrand

_CARD_SEPARATORS = re.compile(r"[\s-]")
_CARD_BRAND_PATTERNS: tuple[tuple[CardBrand, re.Pattern[str]], ...] = (
    (CardBrand.VISA, re.compile(r"^4\d{12}(\d{3})?(\d{3})?$")),
    (
        CardBrand.MASTER,
        re.compile(
            r"^(5[1-5]\d{4}|222[1-9]\d{2}|22[3-9]\d{3}|2[3-6]\d{4}|27[01]\d{3}|2720\d{2})"
            r"\d{10}$"
        ),
    ),
    (CardBrand.AMERICAN_EXPRESS, re.compile(r"^3[47]\d{13}$")),
    (CardBrand.JCB, re.compile(r"^35(28|29|[3-8]\d)\d{12}$")),
)


class CreditCard(BaseModel):
    number: str = Field(min_length=1)
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1000, le=9999)
    verification_value: str | None = None
    first_name: str
    last_name: str

    model_config = ConfigDict(frozen=True)

    @field_validator("number")
    @classmethod
    def normalize_number(cls, value: str) -> str:
        normalized = _CARD_SEPARATORS.sub("", value)
        if not normalized.isdigit():
            raise ValueError("Card number must contain only digits")
        return normalized

    @property
    def brand(self) -> CardBrand | None:
        for brand, pattern in _CARD_BRAND_PATTERNS:
            if pattern.match(self.number):
                return brand
        return None

    @property
    def display_number(self) -> str:
        return f"XXXX-XXXX-XXXX-{self.number[-4:]}"


PaymentInstrument = CreditCard | str | Mapping[str, Any]


class GatewayOptions(BaseModel):
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    locale: str | None = None
    description: str | None = None
    order_id: str | None = None
    tax: int | str | None = None
    ip: str | None = None
    email: str | None = None
    browser_language: str | None = None
    browser_user_agent: str | None = None
    customer_profile: bool = False

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str | None) -> str | None:
        return value.upper() if value is not None else None


class FraudDetails(BaseModel):
    customer_ip: str | None = None
    customer_email: str | None = None
    browser_language: str | None = None
    browser_user_agent: str | None = None

    @classmethod
    def from_options(cls, options: GatewayOptions) -> FraudDetails:
        return cls(
            customer_ip=options.ip or None,
            customer_email=options.email or None,
            browser_language=options.browser_language or None,
            browser_user_agent=options.browser_user_agent or None,
        )

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class OperationResult(BaseModel):
    success: bool
    message: str
    params: dict[str, Any]
    sandbox: bool
    error_code: str | None = None
    authorization: str | None = None

    model_config = ConfigDict(frozen=True)
