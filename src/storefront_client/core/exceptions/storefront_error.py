"""Storefront exception hierarchy.

Every failure raised by the domain, the services or the backend adapter is a
``StorefrontError`` subclass tagged with an ``ErrorKind``, so callers can branch
on the category without string-matching messages.
"""

from typing import Any, ClassVar

from storefront_client.core.exceptions.error_kind import ErrorKind


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    kind: ClassVar[ErrorKind] = ErrorKind.REMOTE_UNAVAILABLE
    retryable: ClassVar[bool] = False

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
