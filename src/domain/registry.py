"""
Account registry - owns the list of accounts and their credential derivatives.

Nothing outside this module reads Account.credential_derivative except the
persistence path; listings and exports return AccountView projections.
"""

import json
import logging

from .exceptions import AccountNotFound
from .models import Account, AccountView
from .persistence import load_collection, write_through
from .ports import ACCOUNTS_KEY, StateStore

logger = logging.getLogger(__name__)


class AccountRegistry:
    """Most-recent-first account list with write-through persistence."""

    def __init__(self, store: StateStore) -> None:
        self._store = store
        self._accounts: list[Account] = []

    def load(self) -> None:
        self._accounts = load_collection(self._store, ACCOUNTS_KEY, Account.from_record)
        logger.info("Loaded %s account(s)", len(self._accounts))

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return any(account.id == account_id for account in self._accounts)

    def views(self) -> list[AccountView]:
        return [account.view() for account in self._accounts]

    def get(self, account_id: str) -> AccountView:
        for account in self._accounts:
            if account.id == account_id:
                return account.view()
        raise AccountNotFound(account_id)

    def add(self, account: Account) -> None:
        """Prepend without persisting; the registration engine persists after pairing."""
        self._accounts.insert(0, account)

    def remove(self, account_id: str) -> None:
        """
        Drop the account with this id and persist the remaining list.

        Correlated notifications are deliberately left in the feed.
        Unknown ids leave the list unchanged but still write it.
        """
        before = len(self._accounts)
        self._accounts = [account for account in self._accounts if account.id != account_id]
        if len(self._accounts) == before:
            logger.info("Remove requested for unknown account %s", account_id)
        else:
            logger.info("Removed account %s", account_id)
        self.persist()

    def export(self, account_id: str) -> str:
        """
        Copyable JSON text of one account's non-credential fields.

        Raises:
            AccountNotFound: No account with this id
        """
        return json.dumps(self.get(account_id).export_fields(), separators=(",", ":"), ensure_ascii=False)

    def persist(self) -> None:
        write_through(self._store, ACCOUNTS_KEY, [account.to_record() for account in self._accounts])
