from webstart.core.notifications.abc import NotificationCallback, NotificationChannel
from webstart.core.notifications.real import SocketNotificationChannel

__all__ = ["NotificationCallback", "NotificationChannel", "SocketNotificationChannel"]
