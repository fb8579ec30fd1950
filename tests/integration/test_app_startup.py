"""Application wiring verified in a fresh interpreter.

The rest of the suite imports element modules during collection, which can hide
elements that ``store.init()`` never loads on its own. These tests start a new
Python process that imports only ``app``, the same way uvicorn does.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]

SCRIPT = """
import json

from fastapi.testclient import TestClient

from app import app
from pcstore.domain import store

client = TestClient(app)

category = client.post("/categories", json={"name": "Graphics Cards"})
manufacturer = client.post("/manufacturers", json={"name": "ASUS"})
product = client.post(
    "/products",
    json={
        "name": "GeForce RTX 4070",
        "price": 599.0,
        "stock_quantity": 3,
        "category_id": category.json()["id"],
        "manufacturer_id": manufacturer.json()["id"],
    },
)
sign_up = client.post("/auth/sign-up", json={"email": "fresh@example.com", "password": "s3cret-pw"})
user_id = sign_up.json()["user_id"]
cart_item = client.post(
    "/cart-items",
    json={"user_id": user_id, "product_id": product.json()["id"], "quantity": 2},
)
order = client.post("/orders", json={"user_id": user_id, "delivery_address": "12 Baker Street"})
stock = client.get("/products/" + product.json()["id"]).json()["stock_quantity"]

print(json.dumps({
    "statuses": {
        "category": category.status_code,
        "manufacturer": manufacturer.status_code,
        "product": product.status_code,
        "sign_up": sign_up.status_code,
        "cart_item": cart_item.status_code,
        "order": order.status_code,
    },
    "stock": stock,
    "aggregates": sorted(record.name for record in store.registry.aggregates.values()),
}))
"""


@pytest.fixture(scope="module")
def fresh_run():
    env = {**os.environ, "PROTEAN_ENV": "test", "PYTHONPATH": str(ROOT / "src")}
    completed = subprocess.run(
        [sys.executable, "-c", SCRIPT],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=120,
    )
    assert completed.returncode == 0, completed.stderr
    return json.loads(completed.stdout.strip().splitlines()[-1])


class TestFreshProcessStartup:
    def test_every_command_is_processed(self, fresh_run):
        assert fresh_run["statuses"] == {
            "category": 201,
            "manufacturer": 201,
            "product": 201,
            "sign_up": 201,
            "cart_item": 201,
            "order": 201,
        }

    def test_order_placement_decrements_stock(self, fresh_run):
        assert fresh_run["stock"] == 1

    def test_init_registers_every_aggregate(self, fresh_run):
        assert fresh_run["aggregates"] == sorted(
            ["Category", "Manufacturer", "Product", "User", "RefreshToken", "CartItem", "Order"]
        )
