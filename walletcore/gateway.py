"""Storage interfaces the use cases depend on."""

from __future__ import annotations

from abc import ABC, abstractmethod

from walletcore.entity import Account, Client, Transaction


class AccountGateway(ABC):
    """Loads and stores accounts."""

    @abstractmethod
    def find_by_id(self, account_id: str) -> Account:
        """Return the account with the given id."""

    @abstractmethod
    def save(self, account: Account) -> None:
        """Persist an account."""


class ClientGateway(ABC):
    """Loads and stores clients."""

    @abstractmethod
    def find_by_id(self, client_id: str) -> Client:
        """Return the client with the given id."""

    @abstractmethod
    def save(self, client: Client) -> None:
        """Persist a client."""


class TransactionGateway(ABC):
    """Stores transactions."""

    @abstractmethod
    def create(self, transaction: Transaction) -> None:
        """Persist a transaction."""