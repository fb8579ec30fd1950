"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's Pydantic request schemas
and the domain's validation rules.
"""

import random
import uuid

from faker import Faker

fake = Faker()

COMPONENT_CATEGORIES = ["Graphics Cards", "Processors", "Motherboards", "Memory", "Storage", "Power Supplies"]
MANUFACTURERS = ["ASUS", "MSI", "Gigabyte", "Corsair", "Kingston", "AMD", "Intel"]


def valid_email() -> str:
    """Unique email: a random suffix keeps sign-ups from colliding."""
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:6]}@{domain}"


def sign_up_data() -> dict:
    return {"email": valid_email(), "password": fake.password(length=12)}


def category_data() -> dict:
    return {
        "name": f"{random.choice(COMPONENT_CATEGORIES)} {uuid.uuid4().hex[:4]}",
        "description": fake.sentence(nb_words=6),
    }


def manufacturer_data() -> dict:
    return {"name": f"{random.choice(MANUFACTURERS)} {uuid.uuid4().hex[:4]}"}


def product_data(category_id: str, manufacturer_id: str, stock_quantity: int | None = None) -> dict:
    return {
        "name": f"{fake.word().title()} {random.randint(100, 9999)}",
        "price": round(random.uniform(19.99, 1999.99), 2),
        "stock_quantity": stock_quantity if stock_quantity is not None else random.randint(50, 500),
        "description": fake.sentence(nb_words=10),
        "component_characteristic": f"tdp={random.choice([65, 105, 125, 220])}W",
        "category_id": category_id,
        "manufacturer_id": manufacturer_id,
    }


def delivery_address() -> str:
    return fake.address().replace("\n", ", ")[:500]
