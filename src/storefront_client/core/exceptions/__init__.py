from storefront_client.core.exceptions.error_kind import ErrorKind
from storefront_client.core.exceptions.not_found_error import NotFoundError
from storefront_client.core.exceptions.remote_unavailable_error import RemoteUnavailableError
from storefront_client.core.exceptions.storefront_error import StorefrontError
from storefront_client.core.exceptions.unauthenticated_error import UnauthenticatedError
from storefront_client.core.exceptions.unauthorized_error import UnauthorizedError
from storefront_client.core.exceptions.validation_failed_error import ValidationFailedError

__all__ = [
    "ErrorKind",
    "NotFoundError",
    "RemoteUnavailableError",
    "StorefrontError",
    "UnauthenticatedError",
    "UnauthorizedError",
    "ValidationFailedError",
]
