"""Test doubles for clocks and the notification sink."""

from datetime import datetime, timedelta, timezone

from src.domain.models import Notification

GATE_SECRET = "goldaccess123"


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self) -> None:
        self.value = 1000.0

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


class FakeNow:
    """Wall clock returning a fixed UTC time, advanced one millisecond per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.value = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.value
        self.value = current + timedelta(milliseconds=1)
        return current


class RecordingSink:
    """NotificationSink that keeps what it was given."""

    def __init__(self) -> None:
        self.published: list[Notification] = []

    def publish(self, notification: Notification) -> None:
        self.published.append(notification)
