"""
Access gate - shared boolean lock in front of the reviewer panel.

The gate opens on an exact, case-sensitive match of the trimmed candidate
against the configured secret and then stays open for the life of the
process. Attempt limiting is optional and disabled unless max_attempts is set.
"""

import logging
import secrets
from dataclasses import dataclass

from .exceptions import GateLockedOut, GateMismatch
from .feedback import FeedbackNotifier

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome back, Admin!"
MISMATCH_TEXT = "Wrong password"
LOCKED_OUT_TEXT = "Too many attempts"


@dataclass
class GateState:
    unlocked: bool = False


class AccessGate:
    """
    Guards visibility of the account registry and notification feed.

    Messages shown here (welcome or wrong password) live in the gate's own
    notifier, separate from the submitter's feedback.
    """

    def __init__(
        self,
        secret: str,
        messages: FeedbackNotifier,
        welcome_seconds: float = 2.0,
        mismatch_seconds: float = 3.0,
        max_attempts: int | None = None,
    ) -> None:
        if not secret:
            raise ValueError("Gate secret must not be empty")
        self._secret = secret
        self._messages = messages
        self._welcome_seconds = welcome_seconds
        self._mismatch_seconds = mismatch_seconds
        self._max_attempts = max_attempts
        self._failed_attempts = 0
        self.state = GateState()

    @property
    def unlocked(self) -> bool:
        return self.state.unlocked

    @property
    def messages(self) -> FeedbackNotifier:
        return self._messages

    def unlock(self, candidate: str) -> None:
        """
        Open the gate or explain why not.

        Raises:
            GateLockedOut: max_attempts is configured and has been reached
            GateMismatch: Candidate does not match the secret
        """
        if self._max_attempts is not None and self._failed_attempts >= self._max_attempts:
            self._messages.error(LOCKED_OUT_TEXT, self._mismatch_seconds)
            raise GateLockedOut(LOCKED_OUT_TEXT)

        entered = candidate.strip()
        if not secrets.compare_digest(entered.encode(), self._secret.encode()):
            self._failed_attempts += 1
            logger.info("Reviewer gate: wrong password (failed attempts: %s)", self._failed_attempts)
            self._messages.error(MISMATCH_TEXT, self._mismatch_seconds)
            raise GateMismatch(MISMATCH_TEXT)

        self.state.unlocked = True
        logger.info("Reviewer gate unlocked")
        self._messages.success(WELCOME_TEXT, self._welcome_seconds)

    def attempt(self, candidate: str) -> bool:
        """Try the candidate secret; True if the gate is now open."""
        try:
            self.unlock(candidate)
        except GateMismatch:
            return False
        return True
