from __future__ import annotations

from shared.contracts import OperationResult


def assert_failed_result(
    result: OperationResult,
    *,
    expected_code: str,
    expected_message: str,
) -> None:
    assert result.success is False
    assert result.error_code == expected_code
    assert result.message == expected_message
    assert result.authorization is None


def assert_succeeded_result(result: OperationResult, *, expected_authorization: str) -> None:
    assert result.success is True
    assert result.authorization == expected_authorization
    assert result.error_code is None
