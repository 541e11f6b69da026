from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from komoju_gateway.gateway.constants import DEFAULT_CURRENCY, LIVE_URL, TEST_URL
from shared.contracts import GatewayEnvironment


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    service_name: str = "komoju-gateway"
    app_env: str = "local"
    log_level: str = "INFO"

    komoju_login: str | None = None
    komoju_environment: GatewayEnvironment = GatewayEnvironment.SANDBOX
    komoju_sandbox_url: str = TEST_URL
    komoju_production_url: str = LIVE_URL
    komoju_timeout_seconds: float = Field(default=10.0, gt=0)
    komoju_default_currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)
    komoju_locale: str = "en"

    @property
    def resolved_base_url(self) -> str:
        if self.komoju_environment == GatewayEnvironment.PRODUCTION:
            return self.komoju_production_url
        return self.komoju_sandbox_url


@lru_cache
def get_settings() -> Settings:
    return Settings()
