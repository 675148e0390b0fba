from storefront_client.core.exceptions.error_kind import ErrorKind
from storefront_client.core.exceptions.storefront_error import StorefrontError


class UnauthenticatedError(StorefrontError):
    """The operation needs a signed-in identity and none is present. Not retried."""

    kind = ErrorKind.UNAUTHENTICATED
