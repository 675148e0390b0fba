from storefront_client.core.exceptions.error_kind import ErrorKind
from storefront_client.core.exceptions.storefront_error import StorefrontError


class UnauthorizedError(StorefrontError):
    """A non-admin caller invoked an admin operation."""

    kind = ErrorKind.UNAUTHORIZED
