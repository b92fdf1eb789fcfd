"""Unit tests for FeedbackNotifier expiry and replacement."""

from src.domain.feedback import FeedbackNotifier
from src.domain.models import FeedbackKind
from tests.fakes import FakeClock


class TestFeedbackNotifier:
    def test_starts_empty(self, clock: FakeClock) -> None:
        assert FeedbackNotifier(clock).current is None

    def test_message_live_until_duration_elapses(self, clock: FakeClock) -> None:
        notifier = FeedbackNotifier(clock)
        notifier.success("Signed up successfully", 4.0)

        clock.advance(3.5)
        assert notifier.current is not None
        assert notifier.current.kind == FeedbackKind.SUCCESS

        clock.advance(0.5)
        assert notifier.current is None

    def test_new_message_supersedes_old(self, clock: FakeClock) -> None:
        """Replacing a message restarts the timer for the new one only."""
        notifier = FeedbackNotifier(clock)
        notifier.error("first", 3.0)
        clock.advance(2.0)
        notifier.success("second", 4.0)

        clock.advance(1.5)
        message = notifier.current
        assert message is not None
        assert message.text == "second"

    def test_superseded_message_never_returns(self, clock: FakeClock) -> None:
        notifier = FeedbackNotifier(clock)
        notifier.success("long", 10.0)
        notifier.error("short", 1.0)

        clock.advance(2.0)
        assert notifier.current is None

    def test_sticky_message_until_acknowledged(self, clock: FakeClock) -> None:
        notifier = FeedbackNotifier(clock)
        notifier.error("blocked", None)

        clock.advance(10_000)
        assert notifier.current is not None

        notifier.acknowledge()
        assert notifier.current is None

    def test_sticky_message_not_replaced(self, clock: FakeClock) -> None:
        """Timed messages cannot push out a sticky one before it is acknowledged."""
        notifier = FeedbackNotifier(clock)
        sticky = notifier.error("blocked", None)

        returned = notifier.error("Please fill name, email and password.", 3.0)
        clock.advance(5.0)

        assert returned is sticky
        assert notifier.current is sticky

        notifier.acknowledge()
        notifier.success("after", 4.0)
        assert notifier.current is not None
        assert notifier.current.text == "after"
