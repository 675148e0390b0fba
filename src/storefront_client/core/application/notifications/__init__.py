from storefront_client.core.application.notifications.notification_center import (
    Notification,
    NotificationCenter,
    NotificationSeverity,
)

__all__ = ["Notification", "NotificationCenter", "NotificationSeverity"]
