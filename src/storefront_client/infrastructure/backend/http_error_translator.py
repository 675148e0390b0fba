"""Maps HTTP outcomes from the storefront backend onto the storefront error taxonomy."""

import httpx

from storefront_client.core.exceptions import (
    NotFoundError,
    RemoteUnavailableError,
    StorefrontError,
    UnauthenticatedError,
    UnauthorizedError,
    ValidationFailedError,
)
from storefront_client.infrastructure.observability.redaction_service import redact_text

_VALIDATION_STATUSES = frozenset({400, 409, 422})
_MAX_DETAIL_CHARS = 500


def translate_status(response: httpx.Response, operation: str) -> StorefrontError:
    """Build the error for a non-2xx response. Callers raise it."""
    status = response.status_code
    detail = _detail(response)
    context = {"operation": operation, "status_code": status}

    if status == 401:
        return UnauthenticatedError(detail or "Sign in required.", context=context)
    if status == 403:
        return UnauthorizedError(detail or "Not allowed.", context=context)
    if status == 404:
        return NotFoundError(detail or "Resource not found.", context=context)
    if status in _VALIDATION_STATUSES:
        return ValidationFailedError(detail or "Request rejected by the backend.", context=context)
    return RemoteUnavailableError(
        detail or f"Backend responded with HTTP {status}",
        status_code=status,
        context=context,
    )


def translate_transport_error(exc: httpx.HTTPError, operation: str) -> RemoteUnavailableError:
    """Timeouts, refused connections and protocol errors."""
    kind = "timeout" if isinstance(exc, httpx.TimeoutException) else "transport"
    return RemoteUnavailableError(
        f"Backend unreachable ({kind}): {redact_text(str(exc))}",
        context={"operation": operation, "failure": kind},
    )


def _detail(response: httpx.Response) -> str:
    """Best-effort human message from the error body."""
    try:
        body = response.json()
    except ValueError:
        return redact_text(response.text.strip()[:_MAX_DETAIL_CHARS])
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return redact_text(value.strip()[:_MAX_DETAIL_CHARS])
    return ""
