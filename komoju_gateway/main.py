from __future__ import annotations

from komoju_gateway.core.config import Settings, get_settings
from komoju_gateway.gateway.adapter import KomojuGateway
from komoju_gateway.gateway.factory import KomojuGatewayFactory
from shared.logging import ENVIRONMENT, configure_logging, get_logger
from shared.observability import configure_otel

logger = get_logger(__name__)


def build_gateway(settings: Settings | None = None) -> KomojuGateway:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    configure_otel(settings.service_name, settings.app_env)

    gateway = KomojuGatewayFactory.from_settings(settings).create()
    logger.info(
        "gateway_ready",
        extra={"extra_fields": {ENVIRONMENT: settings.komoju_environment.value}},
    )
    return gateway
