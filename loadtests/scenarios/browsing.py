"""Catalogue browsing load test scenario.

Read-heavy traffic: list and filter products, open product pages.
"""

import random

from locust import HttpUser, between, task

from loadtests.data_generators import category_data, manufacturer_data, product_data
from loadtests.helpers.state import CatalogueState


class BrowsingUser(HttpUser):
    """Visitor paging through the catalogue without buying."""

    wait_time = between(0.5, 2)
    weight = 3

    def on_start(self):
        self.state = CatalogueState()
        self.state.category_id = self.client.post("/categories", json=category_data()).json()["id"]
        self.state.manufacturer_id = self.client.post("/manufacturers", json=manufacturer_data()).json()["id"]
        for _ in range(3):
            resp = self.client.post(
                "/products",
                json=product_data(self.state.category_id, self.state.manufacturer_id),
                name="POST /products",
            )
            if resp.status_code == 201:
                self.state.product_ids.append(resp.json()["id"])

    @task(5)
    def list_products(self):
        self.client.get("/products", name="GET /products")

    @task(3)
    def filter_by_category(self):
        self.client.get(
            "/products/filter",
            params={"category_id": self.state.category_id, "max_price": 1000},
            name="GET /products/filter",
        )

    @task(2)
    def view_product(self):
        if self.state.product_ids:
            product_id = random.choice(self.state.product_ids)
            self.client.get(f"/products/{product_id}", name="GET /products/{id}")

    @task(1)
    def list_categories(self):
        self.client.get("/categories", name="GET /categories")
