"""Structlog setup for the storefront client.

configure_logging() installs one processor chain for structlog loggers and,
through a ProcessorFormatter, for stdlib loggers (httpx, opentelemetry), so
both end up in the storefront event schema.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from storefront_client.infrastructure.observability.logging.storefront_schema_processor import (
    storefront_schema_processor,
)

_CONFIGURED = False

# Per-request chatter from the transport; failures are logged by the backend adapter.
_NOISY_LIBRARIES = ("httpx", "httpcore")

_JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})


def configure_logging(level: str = "INFO") -> None:
    """Install the processor chain once; later calls are ignored."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer()
    chain = _shared_processors()
    structlog.configure(
        processors=[*chain, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _install_stdlib_bridge(chain, renderer, level)


def get_logger(component: str) -> Any:
    """Structlog logger bound to ``component`` (rendered as context.component)."""
    return structlog.get_logger().bind(context_component=component)


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        storefront_schema_processor,
    ]


def _install_stdlib_bridge(chain: list[Any], renderer: Any, level: str) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *chain, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())
    for name in _NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)


def _select_renderer() -> Any:
    """LOG_FORMAT (json|console) wins; otherwise deployed environments get JSON."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format in ("json", "console"):
        use_json = log_format == "json"
    else:
        use_json = os.environ.get("APP_ENV", "local").lower() in _JSON_ENVIRONMENTS
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
