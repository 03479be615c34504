"""
User-facing notifications.
"""
from intel_reports.notifications.notifier import (
    Notification,
    NotificationLevel,
    Notifier,
)

__all__ = ["Notification", "NotificationLevel", "Notifier"]
