from __future__ import annotations

from dataclasses import dataclass

from shared.contracts import ErrorCategory


@dataclass
class GatewayError(Exception):
    category: ErrorCategory
    message: str

    def __str__(self) -> str:
        return self.message


class InvalidRequestError(GatewayError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCategory.INVALID_REQUEST, message)


class MissingCredentialsError(GatewayError):
    def __init__(self, message: str = "Missing required credential: login") -> None:
        super().__init__(ErrorCategory.MISSING_CREDENTIALS, message)


class ProviderTimeoutError(GatewayError):
    def __init__(self, message: str = "Provider timeout") -> None:
        super().__init__(ErrorCategory.PROVIDER_TIMEOUT, message)


class ProviderConnectionError(GatewayError):
    def __init__(self, message: str = "Provider connection failed") -> None:
        super().__init__(ErrorCategory.PROVIDER_CONNECTION, message)


class ProviderResponseParseError(GatewayError):
    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(ErrorCategory.PROVIDER_RESPONSE_PARSE, message)
