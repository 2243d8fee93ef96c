"""Short-lived status-line notifications."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

DEFAULT_DURATION_SECONDS = 4
MAX_MESSAGE_LENGTH = 200
PERSISTENT_DURATION_SECONDS = 365 * 24 * 60 * 60


class NotificationError(Exception):
    """Base class for notification errors."""


class InvalidDurationError(NotificationError):
    """Raised when a notification duration is not positive."""

    def __init__(self) -> None:
        super().__init__("Invalid notification duration")


class MessageTooLongError(NotificationError):
    """Raised when a notification message exceeds the maximum length."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Message too long: {length} characters")
        self.length = length


class NotificationType(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    STATUS = "status"


@dataclass
class Notification:
    """A message shown for a limited number of seconds."""

    message: str
    notification_type: NotificationType
    duration_seconds: int = DEFAULT_DURATION_SECONDS
    created_at: float = field(default_factory=time.monotonic)

    def __post_init__(self) -> None:
        length = len(self.message.encode("utf-8"))
        if length > MAX_MESSAGE_LENGTH:
            raise MessageTooLongError(length)
        if self.duration_seconds <= 0:
            raise InvalidDurationError()

    @classmethod
    def create(
        cls,
        message: str,
        notification_type: NotificationType,
        duration_seconds: int = DEFAULT_DURATION_SECONDS,
    ) -> Notification:
        """Create a validated notification starting now."""
        return cls(message, notification_type, duration_seconds)

    def _elapsed(self) -> float:
        return time.monotonic() - self.created_at

    def is_expired(self) -> bool:
        return self._elapsed() >= self.duration_seconds

    def remaining_time(self) -> timedelta:
        return timedelta(seconds=max(0.0, self.duration_seconds - self._elapsed()))


@dataclass
class NotificationManager:
    """Holds at most one current notification."""

    current: Notification | None = None

    def show(
        self,
        message: str,
        notification_type: NotificationType,
        duration_seconds: int = DEFAULT_DURATION_SECONDS,
    ) -> None:
        self.current = Notification.create(message, notification_type, duration_seconds)

    def clear(self) -> None:
        self.current = None

    def update(self) -> None:
        """Drop the current notification once it has expired."""
        if self.current is not None and self.current.is_expired():
            self.current = None

    def current_message(self) -> str | None:
        return self.current.message if self.current is not None else None

    def has_notification(self) -> bool:
        return self.current is not None

    def info(self, message: str) -> None:
        self.show(message, NotificationType.INFO)

    def warning(self, message: str) -> None:
        self.show(message, NotificationType.WARNING)

    def error(self, message: str) -> None:
        self.show(message, NotificationType.ERROR)

    def status(self, message: str) -> None:
        self.show(message, NotificationType.STATUS)

    def persistent_status(self, message: str) -> None:
        self.show(message, NotificationType.STATUS, PERSISTENT_DURATION_SECONDS)