"""Tests for user-facing notifications."""

from intel_reports.notifications.notifier import NotificationLevel, Notifier


def test_publish_and_history():
    notifier = Notifier()
    notifier.success("done")
    notifier.warning("careful")

    assert notifier.messages() == ["done", "careful"]
    assert notifier.messages(NotificationLevel.WARNING) == ["careful"]
    assert notifier.last.level == NotificationLevel.WARNING


def test_subscribers_receive_notifications():
    notifier = Notifier()
    received = []
    unsubscribe = notifier.subscribe(received.append)

    notifier.info("hello")
    unsubscribe()
    notifier.info("ignored")

    assert [n.message for n in received] == ["hello"]


def test_failing_subscriber_does_not_break_publish():
    notifier = Notifier()

    def broken(notification):
        raise RuntimeError("handler bug")

    notifier.subscribe(broken)
    notification = notifier.error("still delivered")

    assert notification.message == "still delivered"
    assert notifier.last is notification


def test_history_is_bounded():
    notifier = Notifier(max_history=3)
    for i in range(5):
        notifier.info(f"message {i}")
    assert notifier.messages() == ["message 2", "message 3", "message 4"]
    notifier.clear()
    assert notifier.last is None
