import sqlite3

import pytest

from walletcore.entity import new_account, new_client, new_transaction
from walletcore.repository import AccountDB, ClientDB, RecordNotFoundError, TransactionDB


@pytest.fixture
def db():
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE clients (id VARCHAR(255) PRIMARY KEY, name VARCHAR(255), "
        "email VARCHAR(255), created_at DATETIME, updated_at DATETIME)"
    )
    conn.execute(
        "CREATE TABLE accounts (id VARCHAR(255) PRIMARY KEY, client_id VARCHAR(255), "
        "balance DECIMAL(10, 2), created_at DATETIME, updated_at DATETIME)"
    )
    conn.execute(
        "CREATE TABLE transactions (id VARCHAR(255) PRIMARY KEY, account_id_from VARCHAR(255), "
        "account_id_to VARCHAR(255), amount DECIMAL(10, 2), created_at DATETIME)"
    )
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture
def client():
    return new_client("John Doe", "john.doe@example.com")


def test_account_save(db, client):
    account = new_account(client)
    AccountDB(db).save(account)
    rows = db.execute("SELECT id, client_id FROM accounts").fetchall()
    assert rows == [(account.id, client.id)]


def test_account_find_by_id(db, client):
    ClientDB(db).save(client)
    account = new_account(client)
    repo = AccountDB(db)
    repo.save(account)

    found = repo.find_by_id(account.id)
    assert found.id == account.id
    assert found.client.id == account.client.id
    assert found.balance == account.balance
    assert found.client.name == client.name
    assert found.client.email == client.email
    assert found.created_at == account.created_at


def test_account_find_missing_raises(db):
    with pytest.raises(RecordNotFoundError):
        AccountDB(db).find_by_id("missing")


def test_account_without_client_row_not_found(db, client):
    account = new_account(client)
    repo = AccountDB(db)
    repo.save(account)
    with pytest.raises(RecordNotFoundError):
        repo.find_by_id(account.id)


def test_account_save_duplicate_raises(db, client):
    account = new_account(client)
    repo = AccountDB(db)
    repo.save(account)
    with pytest.raises(sqlite3.IntegrityError):
        repo.save(account)


def test_client_get(db, client):
    repo = ClientDB(db)
    repo.save(client)
    found = repo.find_by_id(client.id)
    assert found.id == client.id
    assert found.name == client.name
    assert found.email == client.email
    assert found.created_at == client.created_at
    assert found.updated_at == client.updated_at


def test_client_save(db, client):
    ClientDB(db).save(client)
    count = db.execute("SELECT COUNT(*) FROM clients WHERE id = ?", (client.id,)).fetchone()[0]
    assert count == 1


def test_client_find_missing_raises(db):
    with pytest.raises(RecordNotFoundError):
        ClientDB(db).find_by_id("missing")


def test_create_transaction(db):
    client1 = new_client("John Doe", "john.doe@example.com")
    client2 = new_client("John Doe 2", "john.doe2@example.com")
    account_from = new_account(client1)
    account_from.balance = 1000
    account_to = new_account(client2)
    account_to.balance = 1000

    transaction = new_transaction(account_from, account_to, 100)
    TransactionDB(db).save(transaction)

    row = db.execute(
        "SELECT id, account_id_from, account_id_to, amount FROM transactions"
    ).fetchone()
    assert row == (transaction.id, account_from.id, account_to.id, 100)