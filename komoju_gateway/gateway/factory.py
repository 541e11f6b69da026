from __future__ import annotations

import httpx

from komoju_gateway.core.config import Settings
from komoju_gateway.core.errors import MissingCredentialsError
from komoju_gateway.gateway.adapter import GatewayConfig, KomojuGateway
from shared.contracts import GatewayEnvironment


class KomojuGatewayFactory:
    def __init__(
        self,
        login: str,
        *,
        environment: GatewayEnvironment = GatewayEnvironment.SANDBOX,
        base_url: str,
        timeout_seconds: float,
        default_currency: str,
        locale: str | None = None,
    ) -> None:
        self._config = GatewayConfig(
            login=login,
            environment=environment,
            default_currency=default_currency,
            locale=locale,
        )
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> KomojuGatewayFactory:
        if not settings.komoju_login:
            raise MissingCredentialsError("Missing required setting: KOMOJU_LOGIN")
        return cls(
            settings.komoju_login,
            environment=settings.komoju_environment,
            base_url=settings.resolved_base_url,
            timeout_seconds=settings.komoju_timeout_seconds,
            default_currency=settings.komoju_default_currency,
            locale=settings.komoju_locale,
        )

    def create(self) -> KomojuGateway:
        client = httpx.Client(base_url=self._base_url, timeout=self._timeout_seconds)
        return KomojuGateway(self._config, client)
