from tests.helpers.assertions import assert_failed_result, assert_succeeded_result
from tests.helpers.factories import (
    make_credit_card,
    make_error_response,
    make_gateway_config,
    make_payment_response,
)
from tests.helpers.fakes import FakeHttpClient, FakeProvider, build_gateway

__all__ = [
    "FakeHttpClient",
    "FakeProvider",
    "assert_failed_result",
    "assert_succeeded_result",
    "build_gateway",
    "make_credit_card",
    "make_error_response",
    "make_gateway_config",
    "make_payment_response",
]
