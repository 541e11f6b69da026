from __future__ import annotations

PROVIDER = "payment.provider"
OPERATION = "payment.operation"
PAYMENT_ID = "payment.id"
ENVIRONMENT = "payment.environment"
OUTCOME = "payment.outcome"
ERROR_CODE = "payment.error_code"
HTTP_METHOD = "http.request.method"
HTTP_ROUTE = "http.route"
HTTP_STATUS_CODE = "http.response.status_code"
