"""Checkout load test scenarios.

ShopperUser walks the full purchase journey. LastUnitRaceUser makes many
shoppers compete for a product with very little stock, which exercises the
stock re-validation and optimistic concurrency paths of order placement.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    category_data,
    delivery_address,
    manufacturer_data,
    product_data,
    sign_up_data,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CatalogueState, ShopperState


def _seed_catalogue(client, products=2, stock_quantity=None) -> CatalogueState:
    catalogue = CatalogueState()
    catalogue.category_id = client.post("/categories", json=category_data()).json()["id"]
    catalogue.manufacturer_id = client.post("/manufacturers", json=manufacturer_data()).json()["id"]
    for _ in range(products):
        resp = client.post(
            "/products",
            json=product_data(catalogue.category_id, catalogue.manufacturer_id, stock_quantity),
            name="POST /products",
        )
        catalogue.product_ids.append(resp.json()["id"])
    return catalogue


class CheckoutJourney(SequentialTaskSet):
    """Sign Up -> Add Items -> Change Quantity -> Place Order -> View Orders."""

    def on_start(self):
        self.catalogue = _seed_catalogue(self.client)
        self.state = ShopperState()

    @task
    def sign_up(self):
        with self.client.post(
            "/auth/sign-up",
            json=sign_up_data(),
            catch_response=True,
            name="POST /auth/sign-up",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.user_id = body["user_id"]
                self.state.access_token = body["access_token"]
                self.state.refresh_token = body["refresh_token"]
            else:
                resp.failure(f"Sign-up failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_items(self):
        for product_id in self.catalogue.product_ids:
            with self.client.post(
                "/cart-items",
                json={"user_id": self.state.user_id, "product_id": product_id, "quantity": random.randint(1, 3)},
                catch_response=True,
                name="POST /cart-items",
            ) as resp:
                if resp.status_code == 201:
                    self.state.cart_item_ids.append(resp.json()["id"])
                else:
                    resp.failure(f"Add cart item failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def change_quantity(self):
        if not self.state.cart_item_ids:
            return
        with self.client.put(
            f"/cart-items/{self.state.cart_item_ids[0]}",
            json={"quantity": 1},
            catch_response=True,
            name="PUT /cart-items/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Change quantity failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def refresh_tokens(self):
        with self.client.post(
            "/auth/refresh-token",
            json={"access_token": self.state.access_token, "refresh_token": self.state.refresh_token},
            catch_response=True,
            name="POST /auth/refresh-token",
        ) as resp:
            if resp.status_code == 200:
                self.state.access_token = resp.json()["access_token"]
                self.state.refresh_token = resp.json()["refresh_token"]
            else:
                resp.failure(f"Refresh failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def place_order(self):
        with self.client.post(
            "/orders",
            json={"user_id": self.state.user_id, "delivery_address": delivery_address()},
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["id"]
            else:
                resp.failure(f"Place order failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def view_orders(self):
        self.client.get(f"/orders/user/{self.state.user_id}", name="GET /orders/user/{id}")
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(1, 3)
    weight = 2
    tasks = [CheckoutJourney]


class LastUnitRaceUser(HttpUser):
    """Many shoppers chasing a handful of units of the same product.

    Conflicts (409) are the expected outcome once stock runs out and are not
    counted as failures.
    """

    wait_time = between(0.1, 0.5)
    weight = 1
    scarce_product_id = None

    def on_start(self):
        if LastUnitRaceUser.scarce_product_id is None:
            catalogue = _seed_catalogue(self.client, products=1, stock_quantity=10)
            LastUnitRaceUser.scarce_product_id = catalogue.product_ids[0]

        body = self.client.post("/auth/sign-up", json=sign_up_data(), name="POST /auth/sign-up").json()
        self.user_id = body["user_id"]

    @task
    def grab_last_unit(self):
        with self.client.post(
            "/cart-items",
            json={"user_id": self.user_id, "product_id": LastUnitRaceUser.scarce_product_id, "quantity": 1},
            catch_response=True,
            name="POST /cart-items (scarce)",
        ) as resp:
            if resp.status_code == 409:
                resp.success()
                return
            if resp.status_code != 201:
                resp.failure(f"Add cart item failed: {resp.status_code}: {extract_error_detail(resp)}")
                return

        with self.client.post(
            "/orders",
            json={"user_id": self.user_id, "delivery_address": delivery_address()},
            catch_response=True,
            name="POST /orders (scarce)",
        ) as resp:
            if resp.status_code in (201, 409):
                resp.success()
            else:
                resp.failure(f"Place order failed: {resp.status_code}: {extract_error_detail(resp)}")
