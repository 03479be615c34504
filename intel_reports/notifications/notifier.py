"""User-facing notifications (success, error, warning, info messages)."""

import logging
import uuid
from enum import Enum
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from intel_reports.models.report import utc_now


logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    """Severity of a user-facing notification."""
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_LOG_LEVELS = {
    NotificationLevel.SUCCESS: logging.INFO,
    NotificationLevel.ERROR: logging.WARNING,
    NotificationLevel.WARNING: logging.INFO,
    NotificationLevel.INFO: logging.INFO,
}


class Notification(BaseModel):
    """A message surfaced to the user."""
    notification_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    ts: str = Field(default_factory=lambda: utc_now().isoformat())
    level: NotificationLevel
    message: str


NotificationHandler = Callable[[Notification], None]


class Notifier:
    """Publishes notifications to subscribers and keeps a bounded history."""

    def __init__(self, max_history: int = 100):
        self.max_history = max_history
        self.history: List[Notification] = []
        self._subscribers: List[NotificationHandler] = []

    def subscribe(self, handler: NotificationHandler) -> Callable[[], None]:
        """Register a handler; returns a callable that unsubscribes it."""
        self._subscribers.append(handler)

        def unsubscribe():
            if handler in self._subscribers:
                self._subscribers.remove(handler)

        return unsubscribe

    def publish(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        logger.log(_LOG_LEVELS[level], f"[{level.value}] {message}")

        self.history.append(notification)
        if len(self.history) > self.max_history:
            del self.history[: len(self.history) - self.max_history]

        for handler in list(self._subscribers):
            try:
                handler(notification)
            except Exception as e:
                logger.error(f"Notification handler failed: {e}")
        return notification

    def success(self, message: str) -> Notification:
        return self.publish(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self.publish(NotificationLevel.ERROR, message)

    def warning(self, message: str) -> Notification:
        return self.publish(NotificationLevel.WARNING, message)

    def info(self, message: str) -> Notification:
        return self.publish(NotificationLevel.INFO, message)

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None

    def messages(self, level: Optional[NotificationLevel] = None) -> List[str]:
        return [n.message for n in self.history if level is None or n.level == level]

    def clear(self):
        self.history.clear()
