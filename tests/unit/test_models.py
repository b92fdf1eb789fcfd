"""
Unit tests for domain records.

Tests the stored JSON layout, the redaction projection and
decoding failures.
"""

from dataclasses import fields
from datetime import datetime, timezone

import pytest

from src.domain.exceptions import PersistenceCorrupt
from src.domain.models import Account, Notification, NotificationPayload

CREATED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def account() -> Account:
    return Account(
        id="1714564800000",
        name="Ada",
        email="ada@x.com",
        extra="",
        created_at=CREATED,
        credential_derivative="a" * 64,
    )


class TestAccountRecord:
    def test_record_layout(self, account: Account) -> None:
        assert account.to_record() == {
            "id": "1714564800000",
            "name": "Ada",
            "email": "ada@x.com",
            "extra": "",
            "createdAt": "2024-05-01T12:00:00+00:00",
            "hashedPassword": "a" * 64,
        }

    def test_from_record_restores_account(self, account: Account) -> None:
        assert Account.from_record(account.to_record()) == account

    def test_from_record_accepts_z_suffix(self, account: Account) -> None:
        record = account.to_record() | {"createdAt": "2024-05-01T12:00:00.000Z"}
        assert Account.from_record(record).created_at == CREATED

    def test_missing_extra_defaults_to_empty(self, account: Account) -> None:
        record = account.to_record()
        del record["extra"]
        assert Account.from_record(record).extra == ""

    def test_missing_credential_is_corrupt(self, account: Account) -> None:
        record = account.to_record()
        del record["hashedPassword"]
        with pytest.raises(PersistenceCorrupt):
            Account.from_record(record)

    def test_non_object_is_corrupt(self) -> None:
        with pytest.raises(PersistenceCorrupt):
            Account.from_record(["not", "an", "object"])

    def test_view_excludes_credential(self, account: Account) -> None:
        view = account.view()
        assert "credential_derivative" not in {f.name for f in fields(view)}
        assert view.export_fields() == {"id": account.id, "name": "Ada", "email": "ada@x.com", "extra": ""}


class TestNotificationRecord:
    def test_payload_type_has_no_credential_field(self) -> None:
        assert {f.name for f in fields(NotificationPayload)} == {"id", "name", "email", "extra", "created_at"}

    def test_for_account_projection(self, account: Account) -> None:
        time = datetime(2024, 5, 1, 12, 0, 1, tzinfo=timezone.utc)
        notification = Notification.for_account(account, time)

        assert notification.id == "n_1714564800000"
        assert notification.title == "New user signed up"
        assert notification.time == time
        assert notification.payload == NotificationPayload(
            id=account.id, name="Ada", email="ada@x.com", extra="", created_at=CREATED
        )

    def test_record_round_trip(self, account: Account) -> None:
        notification = Notification.for_account(account, CREATED)
        assert Notification.from_record(notification.to_record()) == notification

    def test_missing_payload_is_corrupt(self, account: Account) -> None:
        record = Notification.for_account(account, CREATED).to_record()
        del record["payload"]
        with pytest.raises(PersistenceCorrupt):
            Notification.from_record(record)
