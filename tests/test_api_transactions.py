"""
Tests for transaction API endpoints

Tests:
1. Create with form validation
2. List order and fetch by id
3. Full replacement by id
4. Delete by id and by position
5. Balance endpoint
"""

from decimal import Decimal
from uuid import uuid4

import pytest

PREFIX = "/api/v1/transactions"


def payload(**overrides):
    data = {
        "title": "Groceries",
        "amount": "100.50",
        "type": "expense",
        "category": "food",
        "date": "2024-01-05T09:30:00",
    }
    data.update(overrides)
    return data


@pytest.mark.integration
class TestCreateTransaction:
    """Test POST /transactions/"""

    def test_create(self, test_client, service):
        response = test_client.post(f"{PREFIX}/", json=payload())

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Groceries"
        assert Decimal(body["amount"]) == Decimal("100.50")
        assert body["type"] == "expense"
        assert body["category"] == "food"
        assert body["date"] == "2024-01-05T09:30:00"
        assert body["amount_display"] == "฿100.50"
        assert [str(t.id) for t in service.transactions] == [body["id"]]

    def test_largest_amount_is_persisted_exactly(self, test_client, store):
        """Test that an amount at the digit limit survives a reload unchanged"""
        response = test_client.post(f"{PREFIX}/", json=payload(amount="9999999999999.99"))

        assert response.status_code == 201
        assert [t.amount for t in store.load()] == [Decimal("9999999999999.99")]

    def test_title_is_trimmed(self, test_client):
        response = test_client.post(f"{PREFIX}/", json=payload(title="  Rent  "))

        assert response.status_code == 201
        assert response.json()["title"] == "Rent"

    def test_date_defaults_to_now(self, test_client):
        data = payload()
        del data["date"]

        response = test_client.post(f"{PREFIX}/", json=data)

        assert response.status_code == 201
        assert response.json()["date"]

    @pytest.mark.parametrize("overrides", [
        {"title": ""},
        {"title": "   "},
        {"amount": "0"},
        {"amount": "-5"},
        {"amount": "abc"},
        {"amount": "1.005"},
        {"amount": "12345678901234567.89"},
        {"type": "transfer"},
        {"category": "travel"},
    ])
    def test_invalid_form_rejected(self, test_client, service, overrides):
        """Test that invalid input never reaches the service"""
        response = test_client.post(f"{PREFIX}/", json=payload(**overrides))

        assert response.status_code == 422
        assert service.transactions == []


@pytest.mark.integration
class TestReadTransactions:
    """Test GET endpoints"""

    def test_list_newest_first(self, test_client):
        test_client.post(f"{PREFIX}/", json=payload(title="First"))
        test_client.post(f"{PREFIX}/", json=payload(title="Second"))

        response = test_client.get(f"{PREFIX}/")

        assert response.status_code == 200
        assert [t["title"] for t in response.json()] == ["Second", "First"]

    def test_empty_list(self, test_client):
        response = test_client.get(f"{PREFIX}/")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_by_id(self, test_client):
        created = test_client.post(f"{PREFIX}/", json=payload()).json()

        response = test_client.get(f"{PREFIX}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_id(self, test_client):
        response = test_client.get(f"{PREFIX}/{uuid4()}")

        assert response.status_code == 404

    def test_get_malformed_id(self, test_client):
        response = test_client.get(f"{PREFIX}/not-a-uuid")

        assert response.status_code == 422


@pytest.mark.integration
class TestUpdateTransaction:
    """Test PUT /transactions/{id}"""

    def test_update_keeps_id_and_position(self, test_client):
        test_client.post(f"{PREFIX}/", json=payload(title="Oldest"))
        middle = test_client.post(f"{PREFIX}/", json=payload(title="Middle")).json()
        test_client.post(f"{PREFIX}/", json=payload(title="Newest"))

        response = test_client.put(
            f"{PREFIX}/{middle['id']}",
            json=payload(title="Salary", amount="5000", type="income", category="salary"),
        )

        assert response.status_code == 200
        assert response.json()["id"] == middle["id"]
        titles = [t["title"] for t in test_client.get(f"{PREFIX}/").json()]
        assert titles == ["Newest", "Salary", "Oldest"]

    def test_update_requires_every_field(self, test_client):
        created = test_client.post(f"{PREFIX}/", json=payload()).json()

        response = test_client.put(f"{PREFIX}/{created['id']}", json={"title": "Only title"})

        assert response.status_code == 422

    def test_update_unknown_id(self, test_client):
        response = test_client.put(f"{PREFIX}/{uuid4()}", json=payload())

        assert response.status_code == 404


@pytest.mark.integration
class TestDeleteTransaction:
    """Test deleting by id and by position"""

    def test_delete_by_id(self, test_client):
        created = test_client.post(f"{PREFIX}/", json=payload()).json()

        response = test_client.delete(f"{PREFIX}/{created['id']}")

        assert response.status_code == 204
        assert test_client.get(f"{PREFIX}/").json() == []

    def test_delete_unknown_id(self, test_client):
        response = test_client.delete(f"{PREFIX}/{uuid4()}")

        assert response.status_code == 404

    def test_delete_by_position(self, test_client):
        for title in ["c", "b", "a"]:
            test_client.post(f"{PREFIX}/", json=payload(title=title))

        response = test_client.post(f"{PREFIX}/delete", json={"positions": [0, 2]})

        assert response.status_code == 204
        assert [t["title"] for t in test_client.get(f"{PREFIX}/").json()] == ["b"]

    def test_delete_position_out_of_range(self, test_client):
        test_client.post(f"{PREFIX}/", json=payload())

        response = test_client.post(f"{PREFIX}/delete", json={"positions": [3]})

        assert response.status_code == 404
        assert len(test_client.get(f"{PREFIX}/").json()) == 1

    def test_delete_requires_positions(self, test_client):
        response = test_client.post(f"{PREFIX}/delete", json={"positions": []})

        assert response.status_code == 422


@pytest.mark.integration
class TestBalance:
    """Test GET /transactions/balance"""

    def test_balance(self, test_client):
        test_client.post(f"{PREFIX}/", json=payload(title="Salary", amount="1000", type="income", category="salary"))
        test_client.post(f"{PREFIX}/", json=payload(title="Rent", amount="1250.25", category="bills"))

        response = test_client.get(f"{PREFIX}/balance")

        assert response.status_code == 200
        body = response.json()
        assert Decimal(body["balance"]) == Decimal("-250.25")
        assert body["balance_display"] == "-฿250.25"
        assert body["transaction_count"] == 2

    def test_balance_reflects_delete(self, test_client):
        test_client.post(f"{PREFIX}/", json=payload(title="Salary", amount="1000", type="income", category="salary"))
        test_client.post(f"{PREFIX}/", json=payload(title="Rent", amount="400", category="bills"))

        test_client.post(f"{PREFIX}/delete", json={"positions": [0]})

        assert Decimal(test_client.get(f"{PREFIX}/balance").json()["balance"]) == Decimal("1000")


@pytest.mark.integration
class TestAsyncClient:
    """Same endpoints through an async client"""

    async def test_create_and_list(self, async_test_client):
        response = await async_test_client.post(f"{PREFIX}/", json=payload())
        assert response.status_code == 201

        response = await async_test_client.get(f"{PREFIX}/")

        assert response.status_code == 200
        assert len(response.json()) == 1
