from typing import Any

from storefront_client.core.exceptions.error_kind import ErrorKind
from storefront_client.core.exceptions.storefront_error import StorefrontError


class RemoteUnavailableError(StorefrontError):
    """Network or backend failure. Safe to retry by re-invoking the operation."""

    kind = ErrorKind.REMOTE_UNAVAILABLE
    retryable = True

    def __init__(
        self,
        message: str = "",
        *,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.status_code = status_code

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.kind.value}: {self.message}{code}"
