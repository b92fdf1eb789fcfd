"""
Domain records - Accounts, reviewer notifications and feedback messages.

Records are plain dataclasses with explicit (de)serialisation to the JSON
layout kept in the state store. The notification payload is its own type with
no credential field, built from an Account field by field.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .exceptions import PersistenceCorrupt

NOTIFICATION_ID_PREFIX = "n_"
NOTIFICATION_TITLE = "New user signed up"


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise PersistenceCorrupt(f"Expected ISO timestamp string, got {type(value).__name__}")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise PersistenceCorrupt(f"Invalid timestamp: {value!r}") from e


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise PersistenceCorrupt(f"Field {key!r} missing or not a string")
    return value


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise PersistenceCorrupt(f"{what} record is not an object")
    return data


@dataclass(frozen=True)
class AccountView:
    """Credential-free projection of an Account for listings and exports."""

    id: str
    name: str
    email: str
    extra: str
    created_at: datetime

    def export_fields(self) -> dict[str, str]:
        """Fields offered by the copy-info export (no timestamps, no credential)."""
        return {"id": self.id, "name": self.name, "email": self.email, "extra": self.extra}


@dataclass(frozen=True)
class Account:
    """
    A registered account as held by the Account Registry.

    credential_derivative is only ever read by the registry's persistence
    path; every outbound view goes through view().
    """

    id: str
    name: str
    email: str
    extra: str
    created_at: datetime
    credential_derivative: str

    def view(self) -> AccountView:
        return AccountView(
            id=self.id,
            name=self.name,
            email=self.email,
            extra=self.extra,
            created_at=self.created_at,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "extra": self.extra,
            "createdAt": format_timestamp(self.created_at),
            "hashedPassword": self.credential_derivative,
        }

    @classmethod
    def from_record(cls, data: Any) -> "Account":
        data = _require_mapping(data, "Account")
        extra = data.get("extra", "")
        if not isinstance(extra, str):
            raise PersistenceCorrupt("Field 'extra' is not a string")
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            email=_require_str(data, "email"),
            extra=extra,
            created_at=parse_timestamp(data.get("createdAt")),
            credential_derivative=_require_str(data, "hashedPassword"),
        )


@dataclass(frozen=True)
class NotificationPayload:
    """Snapshot of the account fields a reviewer is allowed to see."""

    id: str
    name: str
    email: str
    extra: str
    created_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "NotificationPayload":
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            extra=account.extra,
            created_at=account.created_at,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "extra": self.extra,
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_record(cls, data: Any) -> "NotificationPayload":
        data = _require_mapping(data, "Notification payload")
        extra = data.get("extra", "")
        if not isinstance(extra, str):
            raise PersistenceCorrupt("Field 'extra' is not a string")
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            email=_require_str(data, "email"),
            extra=extra,
            created_at=parse_timestamp(data.get("createdAt")),
        )


@dataclass(frozen=True)
class Notification:
    """Reviewer-facing record created alongside each Account."""

    id: str
    title: str
    time: datetime
    payload: NotificationPayload

    @classmethod
    def for_account(cls, account: Account, time: datetime) -> "Notification":
        return cls(
            id=NOTIFICATION_ID_PREFIX + account.id,
            title=NOTIFICATION_TITLE,
            time=time,
            payload=NotificationPayload.from_account(account),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "time": format_timestamp(self.time),
            "payload": self.payload.to_record(),
        }

    @classmethod
    def from_record(cls, data: Any) -> "Notification":
        data = _require_mapping(data, "Notification")
        return cls(
            id=_require_str(data, "id"),
            title=_require_str(data, "title"),
            time=parse_timestamp(data.get("time")),
            payload=NotificationPayload.from_record(data.get("payload")),
        )


class FeedbackKind(str, Enum):
    """Tone of a feedback message."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FeedbackMessage:
    """
    Transient status message.

    expires_after is in seconds; None means the message stays until it is
    acknowledged or superseded.
    """

    kind: FeedbackKind
    text: str
    expires_after: float | None
