from __future__ import annotations

import json
import logging

from shared.logging import logger as logger_module
from shared.logging.logger import (
    JsonFormatter,
    configure_logging,
    correlation_scope,
    get_correlation_context,
)


def test_correlation_scope_merges_and_restores_context() -> None:
    with correlation_scope({"operation": "purchase", "order_id": "order-1"}):
        with correlation_scope({"payment_id": "pay_1", "order_id": ""}):
            assert get_correlation_context() == {
                "operation": "purchase",
                "order_id": "order-1",
                "payment_id": "pay_1",
            }
        assert get_correlation_context() == {"operation": "purchase", "order_id": "order-1"}

    assert get_correlation_context() == {}


def test_json_formatter_includes_correlation_context_and_trace_id(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(logger_module, "current_trace_id", lambda: "a" * 32)
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="komoju",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="operation_completed",
        args=(),
        exc_info=None,
    )

    with correlation_scope({"operation": "refund", "payment_id": "pay_1"}):
        payload = json.loads(formatter.format(record))

    assert payload["trace_id"] == "a" * 32
    assert payload["operation"] == "refund"
    assert payload["payment_id"] == "pay_1"


def test_json_formatter_includes_exception_and_redacts_nested_card_data() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="komoju",
        level=logging.ERROR,
        pathname=__file__,
        lineno=10,
        msg="failed for card 4111111111111111",
        args=(),
        exc_info=None,
    )
    try:
        raise ValueError("boom")
    except ValueError:
        record.exc_info = True, ValueError("boom"), None
    record.extra_fields = {
        "card_number": "4111111111111111",
        "params": {"pan": "4111111111111111", "tuple_values": ("a", "b")},
    }

    payload = json.loads(formatter.format(record))

    assert payload["card_number"] == "[REDACTED]"
    assert payload["params"]["pan"] == "[REDACTED]"
    assert payload["params"]["tuple_values"] == ["a", "b"]
    assert "4111111111111111" not in payload["message"]
    assert "exception" in payload


def test_configure_logging_is_idempotent_when_root_has_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    try:
        root.handlers.clear()
        configure_logging("INFO")
        first_count = len(root.handlers)
        configure_logging("DEBUG")
        second_count = len(root.handlers)
    finally:
        root.handlers = original_handlers

    assert first_count == 1
    assert second_count == 1
