"""OpenTelemetry spans for backend calls and the checkout workflow.

Until configure_tracing() runs, the API's no-op provider is active, so
trace_operation() and get_tracer() are safe to use from tests and libraries.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Awaitable, Callable

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Span, Status, StatusCode

from storefront_client.core.exceptions import StorefrontError

_CONFIGURED = False
_TRACER_NAME = "storefront-client"


def configure_tracing(service_name: str | None = None) -> None:
    """Install an SDK provider once. OTEL_TRACES_EXPORTER=none keeps spans in-process only."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": service_name or os.environ.get("SERVICE_NAME", _TRACER_NAME),
                "deployment.environment": os.environ.get("APP_ENV", "local"),
            }
        )
    )
    if os.environ.get("OTEL_TRACES_EXPORTER", "console").lower() != "none":
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(_TRACER_NAME)


def record_failure(span: Span, exc: BaseException) -> None:
    """Mark ``span`` failed, tagging storefront errors with their kind."""
    if isinstance(exc, StorefrontError):
        span.set_attribute("storefront.error_kind", exc.kind.value)
        span.set_attribute("storefront.retryable", exc.retryable)
    span.record_exception(exc)
    span.set_status(Status(StatusCode.ERROR, type(exc).__name__))


def trace_operation[**P, R](
    span_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Run the decorated coroutine function inside a span named ``span_name``.

    Exceptions are recorded on the span and re-raised unchanged.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with get_tracer().start_as_current_span(
                span_name, record_exception=False, set_status_on_exception=False
            ) as span:
                try:
                    return await func(*args, **kwargs)
                except Exception as exc:
                    record_failure(span, exc)
                    raise

        return wrapper

    return decorator
