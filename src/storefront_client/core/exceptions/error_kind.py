from enum import StrEnum


class ErrorKind(StrEnum):
    """User-facing failure categories. Each maps to one presentation treatment."""

    UNAUTHENTICATED = "unauthenticated"
    UNAUTHORIZED = "unauthorized"
    REMOTE_UNAVAILABLE = "remote_unavailable"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
