from __future__ import annotations

from numbers import Integral
from typing import Any

_CURRENCY_CODE_LENGTH = 3
_MAX_IDENTIFIER_LENGTH = 128


def _normalize_text(value: Any, *, field_name: str) -> str:
    if value is None or not isinstance(value, str):
        raise ValueError(f"Missing required {field_name}")
    normalized = value.strip()
    if not normalized:
        raise ValueError(f"Missing required {field_name}")
    return normalized


def require_identifier(value: Any, *, field_name: str) -> str:
    normalized = _normalize_text(value, field_name=field_name)
    if len(normalized) > _MAX_IDENTIFIER_LENGTH:
        raise ValueError(f"{field_name} too long")
    return normalized


def ensure_currency_code(currency: str) -> str:
    normalized = _normalize_text(currency, field_name="currency").upper()
    if len(normalized) != _CURRENCY_CODE_LENGTH or not normalized.isalpha():
        raise ValueError(f"Invalid currency code: {normalized}")
    return normalized


def ensure_minor_units(money: Any) -> int:
    # bool is an Integral subclass; True must not become an amount of 1
    if isinstance(money, bool) or not isinstance(money, Integral):
        raise ValueError(f"Amount must be an integer in minor units, got {type(money).__name__}")
    if money < 0:
        raise ValueError("Amount cannot be negative")
    return int(money)
