from __future__ import annotations

import pytest

from shared.utils import basic_auth_header
from shared.utils.validation import ensure_currency_code, ensure_minor_units, require_identifier


def test_require_identifier_rejects_blank_value() -> None:
    with pytest.raises(ValueError):
        require_identifier("   ", field_name="identification")


def test_require_identifier_rejects_overlong_value() -> None:
    with pytest.raises(ValueError, match="too long"):
        require_identifier("p" * 129, field_name="identification")


def test_require_identifier_strips_whitespace() -> None:
    assert require_identifier(" pay_1 ", field_name="identification") == "pay_1"


def test_ensure_currency_code_normalizes_case() -> None:
    assert ensure_currency_code(" jpy ") == "JPY"


@pytest.mark.parametrize("currency", ["YENS", "JP", "J1Y", ""])
def test_ensure_currency_code_rejects_malformed_codes(currency: str) -> None:
    with pytest.raises(ValueError):
        ensure_currency_code(currency)


def test_ensure_minor_units_accepts_zero_and_positive_integers() -> None:
    assert ensure_minor_units(0) == 0
    assert ensure_minor_units(1000) == 1000


@pytest.mark.parametrize("money", [-5, 1.5, "100", None, False])
def test_ensure_minor_units_rejects_non_integer_or_negative(money: object) -> None:
    with pytest.raises(ValueError):
        ensure_minor_units(money)


def test_basic_auth_header_encodes_login_with_empty_password() -> None:
    assert basic_auth_header("sk_test") == "Basic c2tfdGVzdDo="
