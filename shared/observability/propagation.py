from __future__ import annotations

from opentelemetry import trace
from opentelemetry.propagate import inject


def inject_headers(headers: dict[str, str] | None = None) -> dict[str, str]:
    carrier: dict[str, str] = headers or {}
    inject(carrier)
    return carrier


def current_trace_id() -> str:
    span = trace.get_current_span()
    span_context = span.get_span_context()
    if not span_context.is_valid:
        return ""
    return format(span_context.trace_id, "032x")
