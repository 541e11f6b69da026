from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

from komoju_gateway.gateway.adapter import GatewayConfig, KomojuGateway
from komoju_gateway.gateway.constants import TEST_URL


class FakeProvider:
    """Stands in for the provider behind an ``httpx.MockTransport``.

    Responses are queued with ``respond``/``fail``; every request received is
    kept in ``requests`` for assertions.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queue: list[Callable[[httpx.Request], httpx.Response]] = []

    def respond(
        self, status_code: int = 200, *, json_body: Any = None, text: str | None = None
    ) -> None:
        def _build(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text, request=request)
            return httpx.Response(status_code, json=json_body, request=request)

        self._queue.append(_build)

    def fail(self, error: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
            raise error

        self._queue.append(_raise)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        assert self._queue, f"unexpected request {request.method} {request.url}"
        return self._queue.pop(0)(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def client(self, base_url: str = TEST_URL) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler), base_url=base_url)


def build_gateway(provider: FakeProvider, config: GatewayConfig) -> KomojuGateway:
    return KomojuGateway(config, provider.client())


class FakeHttpClient:
    def __init__(self) -> None:
        self.closed = False
        self.next_response: httpx.Response | None = None
        self.next_error: Exception | None = None
        self.last_request: dict[str, Any] | None = None

    def request(
        self, method: str, path: str, *, content: str, headers: dict[str, str]
    ) -> httpx.Response:
        self.last_request = {"method": method, "path": path, "content": content, "headers": headers}
        if self.next_error:
            raise self.next_error
        assert self.next_response is not None
        return self.next_response

    def close(self) -> None:
        self.closed = True
