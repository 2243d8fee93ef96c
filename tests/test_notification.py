import time
from datetime import timedelta

import pytest

from smiview.notification import (
    InvalidDurationError,
    MessageTooLongError,
    Notification,
    NotificationError,
    NotificationManager,
    NotificationType,
)


def test_all_notification_types():
    manager = NotificationManager()
    manager.info("Test info")
    assert manager.current.notification_type is NotificationType.INFO
    manager.warning("Test warning")
    assert manager.current.notification_type is NotificationType.WARNING
    manager.error("Test error")
    assert manager.current.notification_type is NotificationType.ERROR
    manager.status("Test status")
    assert manager.current.notification_type is NotificationType.STATUS
    manager.persistent_status("Test persistent")
    assert manager.current_message() == "Test persistent"
    assert manager.current.duration_seconds == 365 * 24 * 60 * 60


def test_notification_with_duration():
    manager = NotificationManager()
    manager.show("Test", NotificationType.INFO, 10)
    assert manager.current.duration_seconds == 10
    assert manager.current_message() == "Test"


def test_notification_remaining_time():
    notification = Notification.create("Test", NotificationType.INFO)
    remaining = notification.remaining_time()
    assert timedelta(0) < remaining <= timedelta(seconds=4)


def test_clear_notification():
    manager = NotificationManager()
    manager.info("Test")
    assert manager.has_notification()
    manager.clear()
    assert not manager.has_notification()
    assert manager.current_message() is None


def test_default_duration_is_four_seconds():
    assert Notification.create("Test", NotificationType.INFO).duration_seconds == 4


def test_zero_duration_rejected():
    with pytest.raises(InvalidDurationError):
        Notification.create("Test", NotificationType.INFO, 0)


def test_message_too_long_rejected():
    with pytest.raises(MessageTooLongError) as excinfo:
        Notification.create("x" * 201, NotificationType.INFO)
    assert excinfo.value.length == 201
    assert isinstance(excinfo.value, NotificationError)


def test_message_at_limit_accepted():
    notification = Notification.create("x" * 200, NotificationType.INFO)
    assert len(notification.message) == 200


def test_expired_notification_is_removed_on_update():
    manager = NotificationManager()
    manager.current = Notification(
        "old", NotificationType.INFO, 1, created_at=time.monotonic() - 5
    )
    assert manager.current.is_expired()
    assert manager.current.remaining_time() == timedelta(0)
    manager.update()
    assert not manager.has_notification()


def test_fresh_notification_survives_update():
    manager = NotificationManager()
    manager.warning("fresh")
    manager.update()
    assert manager.current_message() == "fresh"


def test_failed_show_keeps_previous_notification():
    manager = NotificationManager()
    manager.info("kept")
    with pytest.raises(InvalidDurationError):
        manager.show("bad", NotificationType.INFO, 0)
    assert manager.current_message() == "kept"