from storefront_client.core.exceptions.error_kind import ErrorKind
from storefront_client.core.exceptions.storefront_error import StorefrontError


class ValidationFailedError(StorefrontError):
    """Invalid input caught locally. Raised before any remote call is made."""

    kind = ErrorKind.VALIDATION_FAILED
