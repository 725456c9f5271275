"""Shared BDD fixtures and step definitions for the stockroom API."""

import pytest
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def context():
    """Ids and the last response carried between steps."""
    return {"store_id": None, "product_id": None, "response": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a store named "{name}"'))
def _(client, context, name):
    response = client.post("/api/stores", json={"name": name, "location": "Accra", "manager": "Store Manager"})
    assert response.status_code == 201
    context["store_id"] = response.json()["data"]["id"]


@given(parsers.cfparse('a product "{name}" with SKU "{sku}" and quantity {quantity:d}'))
def _(client, context, name, sku, quantity):
    response = client.post(
        "/api/products",
        json={
            "name": name,
            "sku": sku,
            "category": "electronics",
            "price": 100,
            "quantity": quantity,
            "storeId": context["store_id"],
        },
    )
    assert response.status_code == 201
    context["product_id"] = response.json()["data"]["id"]


@given(parsers.cfparse("the store has {count:d} products"))
def _(client, context, count):
    for index in range(count):
        response = client.post(
            "/api/products",
            json={
                "name": f"Product {index:02d}",
                "sku": f"BULK-{index:02d}",
                "category": "clothing",
                "price": 20,
                "quantity": index,
                "storeId": context["store_id"],
            },
        )
        assert response.status_code == 201


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the request succeeds with status {status:d}"))
def _(context, status):
    assert context["response"].status_code == status


@then(parsers.cfparse('the request fails with status {status:d} and code "{code}"'))
def _(context, status, code):
    assert context["response"].status_code == status
    assert context["response"].json()["error"]["code"] == code


@then(parsers.cfparse('the error message mentions "{text}"'))
def _(context, text):
    assert text in context["response"].json()["error"]["message"]
