from dataclasses import dataclass

from storefront_client.core.exceptions import StorefrontError


@dataclass(frozen=True)
class OperationResult[T]:
    """Value of a completed operation, or the error it failed with."""

    value: T | None = None
    error: StorefrontError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
