"""
Domain layer - Pure business logic with zero framework imports.

This package contains the sign-up engine: account registry, reviewer
notification feed, access gate and submitter feedback. It defines its own
port interfaces for infrastructure abstraction, ensuring true hexagonal
architecture decoupling.
"""

from .credentials import derive, derive_async
from .dashboard import Dashboard
from .exceptions import (
    AccountNotFound,
    CryptoUnavailable,
    GateLockedOut,
    GateMismatch,
    MissingField,
    PersistenceCorrupt,
    PersistenceUnavailable,
    SignupError,
    SubmissionInFlight,
    ValidationFailed,
)
from .feed import NotificationFeed
from .feedback import FeedbackNotifier
from .gate import AccessGate, GateState
from .models import Account, AccountView, FeedbackKind, FeedbackMessage, Notification, NotificationPayload
from .ports import ACCOUNTS_KEY, NOTIFICATIONS_KEY, NotificationSink, StateStore
from .registration import RegistrationService, SignupForm
from .registry import AccountRegistry

__all__ = [
    "ACCOUNTS_KEY",
    "AccessGate",
    "Account",
    "AccountNotFound",
    "AccountRegistry",
    "AccountView",
    "CryptoUnavailable",
    "Dashboard",
    "FeedbackKind",
    "FeedbackMessage",
    "FeedbackNotifier",
    "GateLockedOut",
    "GateMismatch",
    "GateState",
    "MissingField",
    "NOTIFICATIONS_KEY",
    "Notification",
    "NotificationFeed",
    "NotificationPayload",
    "NotificationSink",
    "PersistenceCorrupt",
    "PersistenceUnavailable",
    "RegistrationService",
    "SignupError",
    "SignupForm",
    "StateStore",
    "SubmissionInFlight",
    "ValidationFailed",
    "derive",
    "derive_async",
]
