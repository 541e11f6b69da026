from __future__ import annotations

from opentelemetry import metrics

meter = metrics.get_meter("komoju-gateway")
provider_latency = meter.create_histogram(
    "komoju_gateway_provider_latency_ms", description="Provider call latency"
)
provider_errors = meter.create_counter(
    "komoju_gateway_provider_errors", description="Provider calls that raised"
)
operation_outcomes = meter.create_counter(
    "komoju_gateway_operation_outcomes", description="Normalized operation results by outcome"
)
