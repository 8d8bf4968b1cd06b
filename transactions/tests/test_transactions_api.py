"""
API Tests for the transactions service

Tests cover:
1. Transaction history (list, send, receive)
2. Channel ledgers (per-user listing, transfer)
3. Routing, CORS and health
"""

import pytest
from fastapi.testclient import TestClient

from transactions.api import create_app
from transactions.channels import ChannelLedgerStore
from transactions.service import TransactionStore


@pytest.fixture
def store():
    return TransactionStore()


@pytest.fixture
def ledger():
    return ChannelLedgerStore()


@pytest.fixture
def client(store, ledger):
    return TestClient(create_app(store, ledger))


class TestTransactionHistory:
    """Tests for /api/transactions."""

    def test_list_transactions(self, client):
        """GET returns the seeded transactions."""
        response = client.get("/api/transactions")

        assert response.status_code == 200
        transactions = response.json()
        assert len(transactions) == 3
        assert set(transactions[0]) == {"id", "amount", "counterparty", "type", "createdAt"}
        assert {t["type"] for t in transactions} <= {"sent", "received"}

    def test_send(self, client):
        """POST /send creates a sent transaction."""
        response = client.post("/api/transactions/send", json={"amount": 99.5, "counterparty": "Kabir"})

        assert response.status_code == 201
        transaction = response.json()
        assert transaction["type"] == "sent"
        assert transaction["counterparty"] == "Kabir"
        assert transaction["amount"] == 99.5

    def test_receive(self, client):
        """POST /receive creates a received transaction."""
        response = client.post("/api/transactions/receive", json={"amount": 501, "counterparty": "Divya"})

        assert response.status_code == 201
        assert response.json()["type"] == "received"

    def test_created_transactions_listed_first(self, client):
        """New transactions are listed ahead of the seed."""
        sent = client.post("/api/transactions/send", json={"amount": 1, "counterparty": "Kabir"}).json()
        received = client.post("/api/transactions/receive", json={"amount": 2, "counterparty": "Divya"}).json()

        listed = client.get("/api/transactions").json()
        assert [t["id"] for t in listed[:2]] == [received["id"], sent["id"]]
        assert int(received["id"]) > int(sent["id"]) > 3

    @pytest.mark.parametrize("path", ["/api/transactions/send", "/api/transactions/receive"])
    @pytest.mark.parametrize("body", [
        {"amount": 0, "counterparty": "Kabir"},
        {"amount": -1, "counterparty": "Kabir"},
        {"amount": 10, "counterparty": ""},
        {"amount": 10},
    ])
    def test_invalid_requests_rejected(self, client, store, path, body):
        """Validation failures return 400 and store nothing."""
        response = client.post(path, json=body)

        assert response.status_code == 400
        assert len(store.list()) == 3

    @pytest.mark.parametrize("path", ["/api/transactions/send", "/api/transactions/receive"])
    def test_string_amount_rejected(self, client, store, path):
        """A quoted amount is not accepted as a number."""
        response = client.post(path, json={"amount": "5", "counterparty": "Kabir"})

        assert response.status_code == 400
        assert "amount" in response.json()["detail"]
        assert len(store.list()) == 3

    def test_malformed_body(self, client):
        response = client.post(
            "/api/transactions/send", content=b"{", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400

    def test_wrong_method(self, client):
        """GET on a create route and POST on the list route are 405."""
        assert client.get("/api/transactions/send").status_code == 405
        assert client.post("/api/transactions", json={}).status_code == 405


class TestChannels:
    """Tests for /api/channels."""

    def test_list_user_transactions(self, client):
        """Each seeded user has one ledger entry."""
        for user in ("user-a", "user-b"):
            response = client.get(f"/api/channels/{user}/transactions")

            assert response.status_code == 200
            entries = response.json()
            assert len(entries) == 1
            assert entries[0]["user"] == user
            assert entries[0]["channel"] == "user-a<->user-b"
            assert set(entries[0]) == {
                "id", "channel", "user", "counterparty", "direction", "amount", "createdAt",
            }

    def test_unknown_user(self, client):
        response = client.get("/api/channels/user-c/transactions")

        assert response.status_code == 400
        assert response.json()["detail"] == "only user-a and user-b are supported"

    def test_transfer(self, client, ledger):
        """A transfer returns both ledger entries."""
        response = client.post(
            "/api/channels/transfer", json={"fromUser": "user-a", "toUser": "user-b", "amount": 99.5}
        )

        assert response.status_code == 201
        body = response.json()
        from_log, to_log = body["fromUserLog"], body["toUserLog"]
        assert from_log["user"] == "user-a"
        assert from_log["direction"] == "sent"
        assert to_log["user"] == "user-b"
        assert to_log["direction"] == "received"
        assert from_log["amount"] == to_log["amount"] == 99.5
        assert from_log["createdAt"] == to_log["createdAt"]

        a_entries = client.get("/api/channels/user-a/transactions").json()
        b_entries = client.get("/api/channels/user-b/transactions").json()
        assert a_entries[0]["id"] == from_log["id"]
        assert b_entries[0]["id"] == to_log["id"]
        assert len(ledger.list_by_user("user-a")) == 2

    @pytest.mark.parametrize("body,detail", [
        ({"fromUser": "user-a", "toUser": "user-a", "amount": 10}, "only user-a and user-b are supported"),
        ({"fromUser": "user-a", "toUser": "user-a", "amount": 0}, "only user-a and user-b are supported"),
        ({"fromUser": "user-a", "toUser": "user-x", "amount": 10}, "only user-a and user-b are supported"),
        ({"fromUser": "user-a", "toUser": "user-b", "amount": 0}, "amount must be greater than 0"),
        ({"fromUser": "user-b", "toUser": "user-a", "amount": -3}, "amount must be greater than 0"),
    ])
    def test_invalid_transfer(self, client, ledger, body, detail):
        """Rejected transfers return 400 and leave both ledgers untouched."""
        response = client.post("/api/channels/transfer", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == detail
        snapshot = ledger.snapshot()
        assert all(len(entries) == 1 for entries in snapshot.values())

    @pytest.mark.parametrize("amount", ["5", "99.5", False])
    def test_transfer_non_numeric_amount(self, client, ledger, amount):
        """Transfers reject amounts that are not JSON numbers."""
        response = client.post(
            "/api/channels/transfer", json={"fromUser": "user-a", "toUser": "user-b", "amount": amount}
        )

        assert response.status_code == 400
        assert "amount" in response.json()["detail"]
        assert all(len(entries) == 1 for entries in ledger.snapshot().values())

    def test_transfer_missing_field(self, client):
        response = client.post("/api/channels/transfer", json={"fromUser": "user-a", "toUser": "user-b"})
        assert response.status_code == 400

    def test_transfer_malformed_body(self, client):
        response = client.post(
            "/api/channels/transfer", content=b"not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "invalid request body"

    def test_transfer_wrong_method(self, client):
        """GET on the transfer route is 405, not a malformed path."""
        response = client.get("/api/channels/transfer")

        assert response.status_code == 405
        assert response.headers["allow"] == "POST"

    @pytest.mark.parametrize("path", [
        "/api/channels/user-a/b/transactions",
        "/api/channels//transactions",
        "/api/channels/user-a",
        "/api/channels/user-a/payments",
    ])
    def test_malformed_channel_path(self, client, path):
        """Paths that do not name a single user ledger are 400."""
        response = client.get(path)

        assert response.status_code == 400
        assert response.json()["detail"] == "invalid path"


class TestServiceRouting:

    @pytest.mark.parametrize("path", [
        "/api/transactions",
        "/api/transactions/send",
        "/api/channels/transfer",
        "/api/channels/user-a/transactions",
    ])
    def test_options(self, client, path):
        response = client.options(path)

        assert response.status_code == 204
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "service": "transactions"}
