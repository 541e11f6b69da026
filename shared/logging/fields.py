from __future__ import annotations

TRACE_ID = "trace_id"
OPERATION = "operation"
PAYMENT_ID = "payment_id"
ORDER_ID = "order_id"
ENVIRONMENT = "environment"
HTTP_METHOD = "http_method"
PATH = "path"
STATUS_CODE = "status_code"
OUTCOME = "outcome"
ERROR_CODE = "error_code"
CARD_BRAND = "card_brand"
