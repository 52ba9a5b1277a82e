"""Domain entities of the wallet: clients, accounts and transactions."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime


class ValidationError(ValueError):
    """Raised when an entity would be put into an invalid state."""


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Client:
    """A wallet customer who may own several accounts."""

    name: str
    email: str
    id: str = field(default_factory=_new_id)
    accounts: list[Account] = field(default_factory=list, repr=False, compare=False)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def _validate(self) -> None:
        if not self.name:
            raise ValidationError("name is required")
        if not self.email:
            raise ValidationError("email is required")

    def update(self, name: str, email: str) -> None:
        """Change name and e-mail, then check that both are present."""
        self.name = name
        self.email = email
        self.updated_at = datetime.now()
        self._validate()

    def add_account(self, account: Account) -> None:
        """Attach an account that belongs to this client."""
        if account.client is None or account.client.id != self.id:
            raise ValidationError("account does not belong to client")
        self.accounts.append(account)


@dataclass
class Account:
    """A balance held by a client."""

    client: Client
    id: str = field(default_factory=_new_id)
    balance: float = 0.0
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def credit(self, amount: float) -> None:
        """Add an amount to the balance."""
        self.balance += amount
        self.updated_at = datetime.now()

    def debit(self, amount: float) -> None:
        """Subtract an amount from the balance."""
        self.balance -= amount
        self.updated_at = datetime.now()


@dataclass
class Transaction:
    """A transfer of money from one account to another."""

    account_from: Account
    account_to: Account
    amount: float
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)

    def _validate(self) -> None:
        if self.amount <= 0:
            raise ValidationError("amount must be greater than 0")
        if self.account_from.balance < self.amount:
            raise ValidationError("insufficient balance")

    def commit(self) -> None:
        """Move the amount between the two accounts."""
        self.account_from.debit(self.amount)
        self.account_to.credit(self.amount)


def new_client(name: str, email: str) -> Client:
    """Create a client, requiring a name and an e-mail address."""
    client = Client(name=name, email=email)
    client._validate()
    return client


def new_account(client: Client | None) -> Account:
    """Open an empty account for a client."""
    if client is None:
        raise ValidationError("client is required")
    return Account(client=client)


def new_transaction(account_from: Account, account_to: Account, amount: float) -> Transaction:
    """Validate and commit a transfer, returning the transaction."""
    transaction = Transaction(account_from=account_from, account_to=account_to, amount=amount)
    transaction._validate()
    transaction.commit()
    return transaction