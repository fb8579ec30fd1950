"""Integration tests for cart item and order endpoints via TestClient."""

import pytest
from factories import create_product, create_user
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pcstore.api.ordering import cart_item_router, order_router
from pcstore.product.product import Product
from protean.utils.globals import current_domain


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_item_router)
    app.include_router(order_router)
    return TestClient(app)


@pytest.fixture()
def user():
    return create_user()


@pytest.fixture()
def product():
    return create_product(stock_quantity=5, price=250.0)


def _add(client, user, product, quantity):
    return client.post(
        "/cart-items",
        json={"user_id": str(user.id), "product_id": str(product.id), "quantity": quantity},
    )


class TestCartItemEndpoints:
    def test_add_to_cart(self, client, user, product):
        response = _add(client, user, product, 2)
        assert response.status_code == 201
        assert response.json()["quantity"] == 2

    def test_quantity_above_stock_conflicts(self, client, user, product):
        response = _add(client, user, product, 6)
        assert response.status_code == 409
        assert "exceeds stock" in response.json()["detail"]

    def test_zero_quantity_is_rejected(self, client, user, product):
        response = _add(client, user, product, 0)
        assert response.status_code == 400
        assert "quantity" in response.json()["detail"]

    def test_negative_quantity_update_is_rejected(self, client, user, product):
        item = _add(client, user, product, 1).json()

        response = client.put(f"/cart-items/{item['id']}", json={"quantity": -2})
        assert response.status_code == 400

    def test_cart_of_user(self, client, user, product):
        _add(client, user, product, 2)

        cart = client.get(f"/cart-items/user/{user.id}").json()
        assert len(cart) == 1
        assert cart[0]["product_id"] == str(product.id)

    def test_update_quantity(self, client, user, product):
        item = _add(client, user, product, 1).json()

        response = client.put(f"/cart-items/{item['id']}", json={"quantity": 4})
        assert response.status_code == 200
        assert response.json()["quantity"] == 4

    def test_update_missing_item(self, client):
        response = client.put("/cart-items/missing", json={"quantity": 1})
        assert response.status_code == 404
        assert response.json()["detail"] == "Cart item under id: missing not found"

    def test_remove(self, client, user, product):
        item = _add(client, user, product, 1).json()

        assert client.delete(f"/cart-items/{item['id']}").status_code == 200
        assert client.get(f"/cart-items/{item['id']}").status_code == 404

    def test_finished_line_is_not_found(self, client, user, product):
        item = _add(client, user, product, 1).json()
        client.post("/orders", json={"user_id": str(user.id), "delivery_address": "12 Baker Street"})

        response = client.get(f"/cart-items/{item['id']}")
        assert response.status_code == 404
        assert response.json()["detail"] == f"Cart item under id: {item['id']} not found"
        assert client.put(f"/cart-items/{item['id']}", json={"quantity": 2}).status_code == 404


class TestOrderEndpoints:
    def test_place_order(self, client, user, product):
        _add(client, user, product, 2)

        response = client.post("/orders", json={"user_id": str(user.id), "delivery_address": "12 Baker Street"})
        assert response.status_code == 201
        order = response.json()
        assert order["status"] == "Processing"
        assert order["total"] == 500.0
        assert len(order["lines"]) == 1

        assert current_domain.repository_for(Product).get(product.id).stock_quantity == 3
        assert client.get(f"/cart-items/user/{user.id}").json() == []

    def test_place_order_with_empty_cart(self, client, user):
        response = client.post("/orders", json={"user_id": str(user.id), "delivery_address": "12 Baker Street"})
        assert response.status_code == 409
        assert response.json()["detail"] == f"Cart of user under id: {user.id} is empty"

    def test_place_order_for_unknown_user(self, client):
        response = client.post("/orders", json={"user_id": "missing", "delivery_address": "12 Baker Street"})
        assert response.status_code == 404
        assert response.json()["detail"] == "User under id: missing not found"

    def test_get_orders(self, client, user, product):
        _add(client, user, product, 1)
        order = client.post("/orders", json={"user_id": str(user.id), "delivery_address": "12 Baker Street"}).json()

        assert client.get(f"/orders/{order['id']}").json()["id"] == order["id"]
        assert [o["id"] for o in client.get(f"/orders/user/{user.id}").json()] == [order["id"]]
        assert len(client.get("/orders").json()) == 1

    def test_get_missing_order(self, client):
        response = client.get("/orders/missing")
        assert response.status_code == 404
        assert response.json()["detail"] == "Order under id: missing not found"
