"""Application use cases: opening clients and accounts and moving money."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from walletcore.entity import new_account, new_client, new_transaction
from walletcore.gateway import AccountGateway, ClientGateway, TransactionGateway


@dataclass(frozen=True)
class CreateAccountInput:
    client_id: str


@dataclass(frozen=True)
class CreateAccountOutput:
    id: str


class CreateAccountUseCase:
    """Open a new account for an existing client."""

    def __init__(self, account_gateway: AccountGateway, client_gateway: ClientGateway) -> None:
        self.account_gateway = account_gateway
        self.client_gateway = client_gateway

    def execute(self, request: CreateAccountInput) -> CreateAccountOutput:
        client = self.client_gateway.find_by_id(request.client_id)
        account = new_account(client)
        self.account_gateway.save(account)
        return CreateAccountOutput(id=account.id)


@dataclass(frozen=True)
class CreateClientInput:
    name: str
    email: str


@dataclass(frozen=True)
class CreateClientOutput:
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class CreateClientUseCase:
    """Register a new client."""

    def __init__(self, client_gateway: ClientGateway) -> None:
        self.client_gateway = client_gateway

    def execute(self, request: CreateClientInput) -> CreateClientOutput:
        client = new_client(request.name, request.email)
        self.client_gateway.save(client)
        return CreateClientOutput(
            id=client.id,
            name=client.name,
            email=client.email,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


@dataclass(frozen=True)
class CreateTransactionInput:
    account_from_id: str
    account_to_id: str
    amount: float


@dataclass(frozen=True)
class CreateTransactionOutput:
    id: str


class CreateTransactionUseCase:
    """Transfer an amount between two stored accounts."""

    def __init__(
        self, account_gateway: AccountGateway, transaction_gateway: TransactionGateway
    ) -> None:
        self.account_gateway = account_gateway
        self.transaction_gateway = transaction_gateway

    def execute(self, request: CreateTransactionInput) -> CreateTransactionOutput:
        account_from = self.account_gateway.find_by_id(request.account_from_id)
        account_to = self.account_gateway.find_by_id(request.account_to_id)
        transaction = new_transaction(account_from, account_to, request.amount)
        self.transaction_gateway.create(transaction)
        return CreateTransactionOutput(id=transaction.id)