from __future__ import annotations

import json
import time
from typing import Any

import httpx

from komoju_gateway.core.errors import (
    InvalidRequestError,
    ProviderConnectionError,
    ProviderResponseParseError,
    ProviderTimeoutError,
)
from komoju_gateway.core.metrics import provider_errors, provider_latency
from komoju_gateway.gateway.constants import (
    DISPLAY_NAME,
    GATEWAY_TIMEOUT_CODE,
    GATEWAY_TIMEOUT_STATUS,
    USER_AGENT,
)
from shared.constants import PAYMENT_PROCESSING_FAILED, translate
from shared.contracts import HttpMethod
from shared.logging import HTTP_METHOD, PATH, STATUS_CODE, get_logger
from shared.observability import (
    HTTP_METHOD as SPAN_HTTP_METHOD,
    HTTP_ROUTE,
    HTTP_STATUS_CODE,
    PROVIDER,
    get_tracer,
    inject_headers,
)
from shared.utils import basic_auth_header

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class KomojuTransport:
    """Issues one JSON request against the provider and returns the decoded body.

    Non-2xx responses are not errors at this layer: their body is decoded like
    any other, because the provider reports business failures through an
    ``error`` envelope. A 504 carries no usable body, so it is replaced by a
    synthetic ``gateway_timeout`` envelope. Bodies that are not a JSON object
    raise ``ProviderResponseParseError``.
    """

    def __init__(self, http_client: httpx.Client, login: str, *, locale: str | None = None) -> None:
        self._http_client = http_client
        self._login = login
        self._locale = locale

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": basic_auth_header(self._login),
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def request(self, method: HttpMethod, path: str, data: dict[str, Any]) -> dict[str, Any]:
        body = self._encode(data)
        with tracer.start_as_current_span("komoju.request") as span:
            span.set_attribute(PROVIDER, DISPLAY_NAME)
            span.set_attribute(SPAN_HTTP_METHOD, method.value)
            span.set_attribute(HTTP_ROUTE, path)
            headers = inject_headers(self.headers())

            start = time.perf_counter()
            try:
                response = self._http_client.request(
                    method.value, path, content=body, headers=headers
                )
                response.raise_for_status()
                raw_body = response.text
            except httpx.HTTPStatusError as exc:
                response = exc.response
                raw_body = self._error_body(response)
            except httpx.TimeoutException as exc:
                self._record_error(method, exc)
                raise ProviderTimeoutError() from exc
            except httpx.RequestError as exc:
                # also covers redirect loops and undecodable content encodings
                self._record_error(method, exc)
                raise ProviderConnectionError(str(exc) or "Provider connection failed") from exc
            finally:
                duration_ms = (time.perf_counter() - start) * 1000
                provider_latency.record(duration_ms, {"method": method.value})

            span.set_attribute(HTTP_STATUS_CODE, response.status_code)
            logger.info(
                "provider_request_completed",
                extra={
                    "extra_fields": {
                        HTTP_METHOD: method.value,
                        PATH: path,
                        STATUS_CODE: response.status_code,
                    }
                },
            )
            try:
                return self._decode(raw_body, response.status_code)
            except ProviderResponseParseError as exc:
                self._record_error(method, exc)
                raise

    def close(self) -> None:
        self._http_client.close()

    def _error_body(self, response: httpx.Response) -> str:
        if response.status_code != GATEWAY_TIMEOUT_STATUS:
            return response.text
        logger.warning(
            "provider_gateway_timeout",
            extra={"extra_fields": {STATUS_CODE: response.status_code}},
        )
        return json.dumps(
            {
                "error": {
                    "code": GATEWAY_TIMEOUT_CODE,
                    "message": translate(PAYMENT_PROCESSING_FAILED, self._locale),
                }
            }
        )

    def _encode(self, data: dict[str, Any]) -> str:
        try:
            return json.dumps(data)
        except TypeError as exc:
            raise InvalidRequestError(f"Request payload is not JSON serializable: {exc}") from exc

    def _decode(self, raw_body: str, status_code: int) -> dict[str, Any]:
        try:
            decoded = json.loads(raw_body)
        except json.JSONDecodeError as exc:
            raise ProviderResponseParseError(
                f"Provider returned a non-JSON body with status {status_code}",
                status_code=status_code,
                body=raw_body,
            ) from exc
        if not isinstance(decoded, dict):
            raise ProviderResponseParseError(
                f"Provider returned a JSON {type(decoded).__name__} instead of an object",
                status_code=status_code,
                body=raw_body,
            )
        return decoded

    def _record_error(self, method: HttpMethod, exc: Exception) -> None:
        provider_errors.add(1, {"method": method.value, "error": type(exc).__name__})
