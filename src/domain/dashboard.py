"""
Dashboard - the single owner of all sign-up state.

Bundles the account registry, the notification feed, the reviewer gate and
the submitter feedback, and is the only path through which they change.
Operations are meant to run on one event loop; the only suspension point is
the credential digest inside RegistrationService.submit.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from .exceptions import PersistenceUnavailable
from .feed import NotificationFeed
from .feedback import FeedbackNotifier
from .gate import AccessGate
from .ports import NotificationSink, StateStore
from .registration import RegistrationService, utc_now
from .registry import AccountRegistry

logger = logging.getLogger(__name__)


@dataclass
class Dashboard:
    registry: AccountRegistry
    feed: NotificationFeed
    gate: AccessGate
    feedback: FeedbackNotifier
    registration: RegistrationService

    @classmethod
    def create(
        cls,
        store: StateStore,
        sink: NotificationSink,
        gate_secret: str,
        gate_max_attempts: int | None = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = utc_now,
        success_seconds: float = 4.0,
        error_seconds: float = 3.0,
        welcome_seconds: float = 2.0,
        gate_error_seconds: float = 3.0,
    ) -> "Dashboard":
        """Wire the components around one store; call load() before serving."""
        registry = AccountRegistry(store)
        feed = NotificationFeed(store)
        feedback = FeedbackNotifier(clock)
        gate = AccessGate(
            gate_secret,
            FeedbackNotifier(clock),
            welcome_seconds=welcome_seconds,
            mismatch_seconds=gate_error_seconds,
            max_attempts=gate_max_attempts,
        )
        registration = RegistrationService(
            registry=registry,
            feed=feed,
            feedback=feedback,
            sink=sink,
            now=now,
            success_seconds=success_seconds,
            error_seconds=error_seconds,
        )
        return cls(registry=registry, feed=feed, gate=gate, feedback=feedback, registration=registration)

    def load(self) -> None:
        """
        Restore both collections from the store.

        Raises:
            PersistenceUnavailable: The store could not be read at all
        """
        try:
            self.registry.load()
            self.feed.load()
        except PersistenceUnavailable:
            logger.error("State store unavailable during startup load")
            raise
