"""Transient, dismissable notifications raised at the operation boundary."""

import itertools
from collections import deque
from dataclasses import dataclass
from enum import StrEnum

from storefront_client.core.exceptions import ErrorKind, StorefrontError

_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.UNAUTHENTICATED: "Please sign in to continue.",
    ErrorKind.UNAUTHORIZED: "You do not have access to this page.",
    ErrorKind.REMOTE_UNAVAILABLE: "The store is unreachable right now. Please try again.",
    ErrorKind.NOT_FOUND: "This item is no longer available.",
    ErrorKind.VALIDATION_FAILED: "Please check the highlighted fields.",
}


class NotificationSeverity(StrEnum):
    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    id: int
    severity: NotificationSeverity
    message: str
    kind: ErrorKind | None = None


class NotificationCenter:
    def __init__(self, limit: int = 20) -> None:
        self._ids = itertools.count(1)
        self._active: deque[Notification] = deque(maxlen=limit)

    def success(self, message: str) -> Notification:
        return self._push(NotificationSeverity.SUCCESS, message)

    def failure(self, error: StorefrontError) -> Notification:
        """Not-found is shown as information: the view renders a placeholder instead."""
        severity = (
            NotificationSeverity.INFO if error.kind == ErrorKind.NOT_FOUND else NotificationSeverity.ERROR
        )
        message = error.message if error.kind == ErrorKind.VALIDATION_FAILED else None
        return self._push(severity, message or _DEFAULT_MESSAGES[error.kind], kind=error.kind)

    def dismiss(self, notification_id: int) -> None:
        self._active = deque(
            (n for n in self._active if n.id != notification_id), maxlen=self._active.maxlen
        )

    def active(self) -> list[Notification]:
        return list(self._active)

    def _push(
        self, severity: NotificationSeverity, message: str, kind: ErrorKind | None = None
    ) -> Notification:
        notification = Notification(id=next(self._ids), severity=severity, message=message, kind=kind)
        self._active.append(notification)
        return notification
