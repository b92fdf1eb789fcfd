"""
Feedback notifier - one self-expiring status message at a time.

Expiry is evaluated lazily against a monotonic clock: a message is current
until its duration has elapsed, a newer message replaces it, or it is
acknowledged. Replaced messages never come back. A sticky message (no
duration) cannot be replaced; only acknowledge() dismisses it.
"""

import time
from collections.abc import Callable

from .models import FeedbackKind, FeedbackMessage


class FeedbackNotifier:
    """Holds the single live FeedbackMessage, if any."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._message: FeedbackMessage | None = None
        self._shown_at = 0.0

    def show(self, kind: FeedbackKind, text: str, expires_after: float | None) -> FeedbackMessage:
        """Replace whatever is live with a new message, unless a sticky one is live."""
        live = self.current
        if live is not None and live.expires_after is None:
            return live
        message = FeedbackMessage(kind=kind, text=text, expires_after=expires_after)
        self._message = message
        self._shown_at = self._clock()
        return message

    def success(self, text: str, expires_after: float | None) -> FeedbackMessage:
        return self.show(FeedbackKind.SUCCESS, text, expires_after)

    def error(self, text: str, expires_after: float | None) -> FeedbackMessage:
        return self.show(FeedbackKind.ERROR, text, expires_after)

    @property
    def current(self) -> FeedbackMessage | None:
        message = self._message
        if message is None:
            return None
        if message.expires_after is not None and self._clock() - self._shown_at >= message.expires_after:
            self._message = None
            return None
        return message

    def acknowledge(self) -> None:
        """Dismiss the live message, including sticky ones."""
        self._message = None
