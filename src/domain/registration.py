"""
Registration domain service - turns a sign-up into an account/notification pair.

Submission Flow
===============

    validate -> derive credential -> build Account -> project Notification
             -> prepend both -> persist both -> publish -> feedback -> clear form

Rules:
- name, email and password must be non-empty after trimming; otherwise
  nothing changes and the form keeps its values
- only one submission may wait on the credential digest at a time
- after CryptoUnavailable every submission is refused until the sticky error
  is acknowledged
- the Account and its Notification are applied in one synchronous step after
  the digest, so either both exist or neither does
- the Notification payload is built field by field from the Account and has
  no credential field
- the two collection writes are separate; a crash between them can leave one
  collection without the other

Note: persistence writes are best-effort (see persistence.write_through).
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone

from .credentials import derive_async
from .exceptions import CryptoUnavailable, MissingField, SubmissionInFlight
from .feed import NotificationFeed
from .feedback import FeedbackNotifier
from .models import Account, FeedbackMessage, Notification
from .ports import NotificationSink
from .registry import AccountRegistry

logger = logging.getLogger(__name__)

SUCCESS_TEXT = "Signed up successfully"
MISSING_FIELD_TEXT = "Please fill name, email and password."
CRYPTO_UNAVAILABLE_TEXT = "Secure password hashing is unavailable; sign-up is disabled."
IN_FLIGHT_TEXT = "A sign-up is already being processed."


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SignupForm:
    """Draft values of the sign-up form."""

    name: str = ""
    email: str = ""
    password: str = ""
    extra: str = ""

    def clear(self) -> None:
        for f in fields(self):
            setattr(self, f.name, "")


@dataclass
class RegistrationService:
    """
    Domain service for sign-up submissions.

    Orchestrates validation, credential derivation, record construction and
    write-through of the registry and the feed.
    """

    registry: AccountRegistry
    feed: NotificationFeed
    feedback: FeedbackNotifier
    sink: NotificationSink
    now: Callable[[], datetime] = utc_now
    success_seconds: float = 4.0
    error_seconds: float = 3.0
    form: SignupForm = field(default_factory=SignupForm)
    _in_flight: bool = field(default=False, init=False, repr=False)
    _last_id_ms: int = field(default=0, init=False, repr=False)
    _blocked_by: FeedbackMessage | None = field(default=None, init=False, repr=False)

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def blocked(self) -> bool:
        """True while an unacknowledged CryptoUnavailable error blocks sign-up."""
        return self._blocked_by is not None and self.feedback.current is self._blocked_by

    async def submit(self, name: str, email: str, password: str, extra: str = "") -> Account:
        """
        Register a new account and notify the reviewer.

        Args:
            name: Full name (trimmed)
            email: Email address (trimmed, otherwise stored as entered)
            password: Password; only its derivative is kept
            extra: Optional free text such as phone or role (trimmed)

        Returns:
            The created Account

        Raises:
            MissingField: name, email or password is blank
            SubmissionInFlight: Another submission is awaiting its digest
            CryptoUnavailable: The credential digest cannot be computed, or an
                earlier failure has not been acknowledged yet
        """
        if self.blocked:
            raise CryptoUnavailable(CRYPTO_UNAVAILABLE_TEXT)

        missing = [
            label
            for label, value in (("name", name), ("email", email), ("password", password))
            if not value.strip()
        ]
        if missing:
            self.feedback.error(MISSING_FIELD_TEXT, self.error_seconds)
            raise MissingField(missing)

        if self._in_flight:
            self.feedback.error(IN_FLIGHT_TEXT, self.error_seconds)
            raise SubmissionInFlight(IN_FLIGHT_TEXT)

        self._in_flight = True
        try:
            credential = await derive_async(password)
        except CryptoUnavailable:
            logger.exception("Credential derivation unavailable, sign-up blocked")
            self._blocked_by = self.feedback.error(CRYPTO_UNAVAILABLE_TEXT, None)
            raise
        finally:
            self._in_flight = False

        created_at = self.now()
        account = Account(
            id=self._next_id(created_at),
            name=name.strip(),
            email=email.strip(),
            extra=extra.strip(),
            created_at=created_at,
            credential_derivative=credential,
        )
        notification = Notification.for_account(account, time=self.now())

        self.registry.add(account)
        self.feed.add(notification)
        self.registry.persist()
        self.feed.persist()
        logger.info("Account %s created", account.id)

        self.sink.publish(notification)
        self.feedback.success(SUCCESS_TEXT, self.success_seconds)
        self.form.clear()
        return account

    async def submit_form(self) -> Account:
        """Submit the current draft; the draft survives validation errors."""
        form = self.form
        return await self.submit(form.name, form.email, form.password, form.extra)

    def update_form(self, **values: str) -> SignupForm:
        """Set draft fields by name; unknown names raise TypeError."""
        allowed = {f.name for f in fields(SignupForm)}
        unknown = set(values) - allowed
        if unknown:
            raise TypeError(f"Unknown form field(s): {', '.join(sorted(unknown))}")
        for key, value in values.items():
            setattr(self.form, key, value)
        return self.form

    def _next_id(self, created_at: datetime) -> str:
        """Millisecond timestamp, bumped so ids strictly increase within a process."""
        candidate = int(created_at.timestamp() * 1000)
        if candidate <= self._last_id_ms:
            candidate = self._last_id_ms + 1
        self._last_id_ms = candidate
        return str(candidate)
