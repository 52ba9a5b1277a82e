# walletcore

The domain core of a digital wallet. It models clients, the accounts they
own and transfers between accounts. It also provides SQLite repositories and
use cases that connect the model to storage.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Domain model

`walletcore.entity` defines `Client`, `Account` and `Transaction` as
dataclasses. Each one gets a random UUID string as its `id`. Use the factory
functions to create them, because the factories run the checks:

```python
from walletcore.entity import new_client, new_account, new_transaction, ValidationError

alice = new_client("Alice", "alice@example.com")
bob = new_client("Bob", "bob@example.com")

alice_account = new_account(alice)
bob_account = new_account(bob)
alice_account.credit(1000)

new_transaction(alice_account, bob_account, 100)
print(alice_account.balance, bob_account.balance)  # 900.0 100.0

try:
    new_transaction(alice_account, bob_account, 5000)
except ValidationError as exc:
    print(exc)  # insufficient balance
```

`ValidationError` is a subclass of `ValueError`. It is raised in these cases:

- `new_client` or `Client.update` gets an empty name or e-mail.
- `new_account` gets `None` as the client.
- `new_transaction` gets an amount that is not positive, or the source
  account's balance is lower than the amount. In either case no balance is
  changed.
- `Client.add_account` gets an account owned by another client.

`Account.credit` and `Account.debit` change the balance without any checks.

## Persistence

`walletcore.repository` stores the model through a `sqlite3` connection that
you supply. The repositories do not create tables, so you must create them
first. Timestamps are stored as ISO 8601 strings.

```python
import sqlite3
from walletcore.repository import ClientDB, AccountDB, TransactionDB, RecordNotFoundError

db = sqlite3.connect(":memory:")
db.executescript("""
CREATE TABLE clients (id TEXT PRIMARY KEY, name TEXT, email TEXT,
                      created_at TEXT, updated_at TEXT);
CREATE TABLE accounts (id TEXT PRIMARY KEY, client_id TEXT, balance REAL,
                       created_at TEXT, updated_at TEXT);
CREATE TABLE transactions (id TEXT PRIMARY KEY, account_id_from TEXT,
                           account_id_to TEXT, amount REAL, created_at TEXT);
""")

clients = ClientDB(db)
accounts = AccountDB(db)
clients.save(alice)
accounts.save(alice_account)

found = accounts.find_by_id(alice_account.id)
print(found.client.name, found.balance)
```

- `ClientDB` has `save(client)` and `find_by_id(client_id)`.
- `AccountDB` has `save(account)` and `find_by_id(account_id)`. The lookup
  joins `accounts` with `clients` and returns the account with its client
  filled in.
- `TransactionDB` has `save(transaction)`.

Each `save` inserts a new row. Calling it again with an existing id raises
`sqlite3.IntegrityError`. A lookup by an unknown id raises
`RecordNotFoundError`, which is a subclass of `LookupError`.

## Use cases

`walletcore.usecases` provides three use cases. Each one has an
`execute(request)` method that takes a frozen input dataclass and returns an
output dataclass.

| Use case | Gateways | Input | Output |
| --- | --- | --- | --- |
| `CreateClientUseCase` | client | `CreateClientInput(name, email)` | `CreateClientOutput(id, name, email, created_at, updated_at)` |
| `CreateAccountUseCase` | account, client | `CreateAccountInput(client_id)` | `CreateAccountOutput(id)` |
| `CreateTransactionUseCase` | account, transaction | `CreateTransactionInput(account_from_id, account_to_id, amount)` | `CreateTransactionOutput(id)` |

The gateways are the abstract classes in `walletcore.gateway`:
`AccountGateway` (`find_by_id`, `save`), `ClientGateway` (`find_by_id`,
`save`) and `TransactionGateway` (`create`). `ClientDB` and `AccountDB`
implement the first two. `TransactionDB` does not implement
`TransactionGateway`, because its method is named `save`. To use it in
`CreateTransactionUseCase`, wrap it:

```python
from walletcore.gateway import TransactionGateway
from walletcore.usecases import (
    CreateClientUseCase, CreateClientInput,
    CreateTransactionUseCase, CreateTransactionInput,
)

class SqliteTransactions(TransactionGateway):
    def __init__(self, db):
        self._store = TransactionDB(db)

    def create(self, transaction):
        self._store.save(transaction)

output = CreateClientUseCase(clients).execute(
    CreateClientInput(name="Carol", email="carol@example.com")
)
print(output.id)
```

Errors from the entities and the gateways are passed on to the caller
unchanged.

## What this package does not do

- It has no command-line program and no network or HTTP interface. It is a
  library only.
- It does not create or migrate database tables.
- `CreateTransactionUseCase` changes balances only on the account objects it
  loaded. It does not write the new balances back through the account
  gateway, and the repositories have no update operation.
- Persisted accounts keep only `id`, `client_id`, `balance` and `created_at`.
  The `updated_at` field and a client's list of accounts are not stored.