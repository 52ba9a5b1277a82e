"""SQLite-backed storage for clients, accounts and transactions."""

from __future__ import annotations

import sqlite3
from datetime import datetime

from walletcore.entity import Account, Client, Transaction
from walletcore.gateway import AccountGateway, ClientGateway


class RecordNotFoundError(LookupError):
    """Raised when a lookup by id matches no row."""


def _to_db_time(value: datetime) -> str:
    return value.isoformat()


def _from_db_time(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


class AccountDB(AccountGateway):
    """Account storage in the ``accounts`` table, joined with ``clients``."""

    _FIND_SQL = (
        "SELECT a.id, a.client_id, a.balance, a.created_at, "
        "c.id, c.name, c.email, c.created_at "
        "FROM accounts a INNER JOIN clients c ON a.client_id = c.id "
        "WHERE a.id = ?"
    )
    _INSERT_SQL = "INSERT INTO accounts (id, client_id, balance, created_at) VALUES (?, ?, ?, ?)"

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db

    def find_by_id(self, account_id: str) -> Account:
        """Load an account together with its owning client."""
        row = self._db.execute(self._FIND_SQL, (account_id,)).fetchone()
        if row is None:
            raise RecordNotFoundError(f"account {account_id!r} not found")
        acc_id, _client_id, balance, acc_created, cli_id, name, email, cli_created = row
        client = Client(
            name=name,
            email=email,
            id=cli_id,
            created_at=_from_db_time(cli_created),
        )
        return Account(
            client=client,
            id=acc_id,
            balance=float(balance),
            created_at=_from_db_time(acc_created),
        )

    def save(self, account: Account) -> None:
        """Insert a new account row."""
        with self._db:
            self._db.execute(
                self._INSERT_SQL,
                (
                    account.id,
                    account.client.id,
                    account.balance,
                    _to_db_time(account.created_at),
                ),
            )


class ClientDB(ClientGateway):
    """Client storage in the ``clients`` table."""

    _FIND_SQL = "SELECT id, name, email, created_at, updated_at FROM clients WHERE id = ?"
    _INSERT_SQL = (
        "INSERT INTO clients (id, name, email, created_at, updated_at) VALUES (?, ?, ?, ?, ?)"
    )

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db

    def find_by_id(self, client_id: str) -> Client:
        """Load a client by id."""
        row = self._db.execute(self._FIND_SQL, (client_id,)).fetchone()
        if row is None:
            raise RecordNotFoundError(f"client {client_id!r} not found")
        cli_id, name, email, created_at, updated_at = row
        return Client(
            name=name,
            email=email,
            id=cli_id,
            created_at=_from_db_time(created_at),
            updated_at=_from_db_time(updated_at),
        )

    def save(self, client: Client) -> None:
        """Insert a new client row."""
        with self._db:
            self._db.execute(
                self._INSERT_SQL,
                (
                    client.id,
                    client.name,
                    client.email,
                    _to_db_time(client.created_at),
                    _to_db_time(client.updated_at),
                ),
            )


class TransactionDB:
    """Transaction storage in the ``transactions`` table."""

    _INSERT_SQL = (
        "INSERT INTO transactions (id, account_id_from, account_id_to, amount, created_at) "
        "VALUES (?, ?, ?, ?, ?)"
    )

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db

    def save(self, transaction: Transaction) -> None:
        """Insert a new transaction row."""
        with self._db:
            self._db.execute(
                self._INSERT_SQL,
                (
                    transaction.id,
                    transaction.account_from.id,
                    transaction.account_to.id,
                    transaction.amount,
                    _to_db_time(transaction.created_at),
                ),
            )