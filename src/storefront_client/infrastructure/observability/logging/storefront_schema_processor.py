"""Structlog processor producing the storefront log document.

Flat keyword arguments are grouped into nested blocks::

    {timestamp, level, service, environment, trace_id, span_id, message,
     processing: {...}, error: {...}, context: {...}, extra: {...}}

A block is emitted only when its trigger key is present; anything left over
lands in ``extra`` after redaction.
"""

from __future__ import annotations

import os
from typing import Any

from opentelemetry import trace

from storefront_client.infrastructure.observability.redaction_service import (
    redact_mapping,
    redact_text,
)

# block name -> (trigger key, {output field: input key})
_BLOCKS: dict[str, tuple[str, dict[str, str]]] = {
    "processing": (
        "processing_status",
        {
            "status": "processing_status",
            "duration_ms": "processing_duration_ms",
            "attempts": "processing_attempts",
        },
    ),
    "error": (
        "error_type",
        {
            "type": "error_type",
            "code": "error_code",
            "details": "error_details",
            "retryable": "error_retryable",
        },
    ),
    "context": (
        "source_system",
        {
            "source_system": "source_system",
            "component": "context_component",
            "operation": "operation",
            "event_type": "event_type",
        },
    ),
}


def storefront_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    span_context = trace.get_current_span().get_span_context()
    document: dict[str, Any] = {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "storefront-client"),
        "environment": os.environ.get("APP_ENV", "local"),
        "trace_id": format(span_context.trace_id, "032x") if span_context.is_valid else None,
        "span_id": format(span_context.span_id, "016x") if span_context.is_valid else None,
        "message": event_dict.pop("event", ""),
    }

    # Components log without a source system; they still get a context block.
    if "context_component" in event_dict or "operation" in event_dict:
        event_dict.setdefault("source_system", None)

    for block, (trigger, fields) in _BLOCKS.items():
        if trigger not in event_dict:
            continue
        document[block] = {name: event_dict.pop(key, None) for name, key in fields.items()}

    _normalize(document)
    if event_dict:
        document["extra"] = redact_mapping(event_dict)
    return document


def _normalize(document: dict[str, Any]) -> None:
    processing = document.get("processing")
    if processing is not None:
        try:
            processing["duration_ms"] = float(processing["duration_ms"])
        except (TypeError, ValueError):
            processing["duration_ms"] = None

    error = document.get("error")
    if error is not None:
        error["retryable"] = bool(error["retryable"])
        if isinstance(error["details"], str):
            error["details"] = redact_text(error["details"])
