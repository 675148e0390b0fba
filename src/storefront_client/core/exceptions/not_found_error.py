from storefront_client.core.exceptions.error_kind import ErrorKind
from storefront_client.core.exceptions.storefront_error import StorefrontError


class NotFoundError(StorefrontError):
    """A referenced product or order no longer exists. Rendered as an empty view."""

    kind = ErrorKind.NOT_FOUND
