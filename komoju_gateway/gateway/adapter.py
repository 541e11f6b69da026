from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx
from opentelemetry import trace

from komoju_gateway.core.errors import InvalidRequestError, MissingCredentialsError
from komoju_gateway.core.metrics import operation_outcomes
from komoju_gateway.gateway import payload
from komoju_gateway.gateway.constants import (
    DEFAULT_CURRENCY,
    SUCCESS_MESSAGE,
    customers_path,
    normalize_error_code,
    payment_path,
    payments_path,
    refund_path,
    tokens_path,
)
from komoju_gateway.gateway.transport import KomojuTransport
from shared.contracts import (
    CreditCard,
    GatewayEnvironment,
    GatewayOptions,
    HttpMethod,
    OperationResult,
    PaymentInstrument,
)
from shared.logging import (
    CARD_BRAND,
    ENVIRONMENT,
    ERROR_CODE,
    OPERATION,
    ORDER_ID,
    OUTCOME,
    PAYMENT_ID,
    correlation_scope,
    get_logger,
)
from shared.observability import (
    ENVIRONMENT as SPAN_ENVIRONMENT,
    ERROR_CODE as SPAN_ERROR_CODE,
    OPERATION as SPAN_OPERATION,
    OUTCOME as SPAN_OUTCOME,
    PAYMENT_ID as SPAN_PAYMENT_ID,
    get_tracer,
)
from shared.utils import ensure_currency_code, ensure_minor_units, require_identifier

logger = get_logger(__name__)
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class GatewayConfig:
    login: str
    environment: GatewayEnvironment = GatewayEnvironment.SANDBOX
    default_currency: str = DEFAULT_CURRENCY
    locale: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.login, str) or not self.login.strip():
            raise MissingCredentialsError()

    @property
    def sandbox(self) -> bool:
        return self.environment == GatewayEnvironment.SANDBOX


class KomojuGateway:
    """Komoju payment gateway.

    Each operation builds one JSON request, sends it, and normalizes the reply
    into an ``OperationResult``. Declines and other provider-reported failures
    come back as unsuccessful results; only transport problems and unreadable
    responses raise (see ``komoju_gateway.core.errors``).
    """

    def __init__(self, config: GatewayConfig, http_client: httpx.Client) -> None:
        self._config = config
        self._transport = KomojuTransport(http_client, config.login, locale=config.locale)

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @property
    def sandbox(self) -> bool:
        return self._config.sandbox

    def purchase(
        self,
        money: int,
        payment: PaymentInstrument,
        options: GatewayOptions | Mapping[str, Any] | None = None,
    ) -> OperationResult:
        opts = self._options(options)
        with self._operation("purchase", order_id=opts.order_id, payment=payment):
            post = payload.build_purchase_payload(
                self._money(money),
                payment,
                opts,
                default_currency=self._currency(opts),
            )
            return self.commit(payments_path(), post)

    def refund(
        self,
        money: int,
        identification: str,
        options: GatewayOptions | Mapping[str, Any] | None = None,
    ) -> OperationResult:
        self._options(options)
        payment_id = self._identifier(identification, "identification")
        with self._operation("refund", payment_id=payment_id):
            post = payload.build_refund_payload(self._money(money))
            return self.commit(refund_path(payment_id), post)

    def void(
        self,
        identification: str,
        options: GatewayOptions | Mapping[str, Any] | None = None,
    ) -> OperationResult:
        # the provider has no cancel endpoint; an empty refund voids the payment
        self._options(options)
        payment_id = self._identifier(identification, "identification")
        with self._operation("void", payment_id=payment_id):
            return self.commit(refund_path(payment_id), payload.build_refund_payload(0))

    def store(
        self,
        payment: PaymentInstrument,
        options: GatewayOptions | Mapping[str, Any] | None = None,
    ) -> OperationResult:
        opts = self._options(options)
        with self._operation("store", payment=payment):
            post = payload.build_store_payload(payment, opts)
            path = customers_path() if opts.customer_profile else tokens_path()
            return self.commit(path, post)

    def continue_payment(
        self,
        payment_id: str,
        payment_details: PaymentInstrument,
        options: GatewayOptions | Mapping[str, Any] | None = None,
    ) -> OperationResult:
        """Resume a pending payment (e.g. after a redirect) with more payment details."""
        opts = self._options(options)
        identifier = self._identifier(payment_id, "payment_id")
        with self._operation("continue", payment_id=identifier, payment=payment_details):
            post = payload.build_continue_payload(payment_details, opts)
            return self.commit(payment_path(identifier), post, HttpMethod.PATCH)

    def commit(
        self, path: str, params: dict[str, Any], method: HttpMethod = HttpMethod.POST
    ) -> OperationResult:
        response = self._transport.request(method, path, params)
        success = "error" not in response
        if success:
            result = OperationResult(
                success=True,
                message=SUCCESS_MESSAGE,
                params=response,
                sandbox=self.sandbox,
                authorization=_optional_text(response.get("id")),
            )
        else:
            error = response["error"]
            if not isinstance(error, Mapping):
                error = {"message": error}
            result = OperationResult(
                success=False,
                message=_optional_text(error.get("message")) or "",
                params=response,
                sandbox=self.sandbox,
                error_code=normalize_error_code(_optional_text(error.get("code"))),
            )
        self._log_result(result)
        return result

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> KomojuGateway:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @contextmanager
    def _operation(
        self,
        name: str,
        *,
        payment_id: str | None = None,
        order_id: str | None = None,
        payment: Any = None,
    ) -> Iterator[None]:
        fields = {
            OPERATION: name,
            ENVIRONMENT: self._config.environment.value,
            PAYMENT_ID: payment_id or "",
            ORDER_ID: order_id or "",
        }
        if isinstance(payment, CreditCard) and payment.brand is not None:
            fields[CARD_BRAND] = payment.brand.value
        with correlation_scope(fields), tracer.start_as_current_span(f"komoju.{name}") as span:
            span.set_attribute(SPAN_OPERATION, name)
            span.set_attribute(SPAN_ENVIRONMENT, self._config.environment.value)
            if payment_id:
                span.set_attribute(SPAN_PAYMENT_ID, payment_id)
            yield

    def _log_result(self, result: OperationResult) -> None:
        outcome = "success" if result.success else "failure"
        span = trace.get_current_span()
        span.set_attribute(SPAN_OUTCOME, outcome)
        if result.error_code:
            span.set_attribute(SPAN_ERROR_CODE, result.error_code)
        operation_outcomes.add(1, {"outcome": outcome, "error_code": result.error_code or ""})
        logger.info(
            "operation_completed",
            extra={"extra_fields": {OUTCOME: outcome, ERROR_CODE: result.error_code}},
        )

    def _options(self, options: GatewayOptions | Mapping[str, Any] | None) -> GatewayOptions:
        if options is None:
            return GatewayOptions()
        if isinstance(options, GatewayOptions):
            return options
        try:
            return GatewayOptions.model_validate(dict(options))
        except ValueError as exc:
            raise InvalidRequestError(f"Invalid options: {exc}") from exc

    def _currency(self, options: GatewayOptions) -> str:
        try:
            return ensure_currency_code(options.currency or self._config.default_currency)
        except ValueError as exc:
            raise InvalidRequestError(str(exc)) from exc

    def _money(self, money: Any) -> int:
        try:
            return ensure_minor_units(money)
        except ValueError as exc:
            raise InvalidRequestError(str(exc)) from exc

    def _identifier(self, value: Any, field_name: str) -> str:
        try:
            identifier = require_identifier(value, field_name=field_name)
        except ValueError as exc:
            raise InvalidRequestError(str(exc)) from exc
        return quote(identifier, safe="")


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
