# tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.pool import StaticPool

from orderdesk.data.database import Database
from orderdesk.data.models.product import ProductModel
from orderdesk.domain.schemas import OrderCreate
from orderdesk.main import create_app
from orderdesk.services import notification_service
from orderdesk.utils import settings


class RecordingTask:
    """Zastepuje celery task - zapisuje payloady zamiast wysylac do brokera."""

    def __init__(self):
        self.payloads = []

    def delay(self, payload):
        self.payloads.append(payload)


@pytest.fixture(autouse=True)
def queued_notifications(monkeypatch):
    task = RecordingTask()
    monkeypatch.setattr(notification_service, "send_order_email_task", task)
    return task


@pytest.fixture
def database():
    db = Database("sqlite://", poolclass=StaticPool)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    s = database.session()
    yield s
    s.close()


@pytest.fixture
def client(database):
    app = create_app(database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_headers():
    token = jwt.encode({"id": "admin"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def catalog(session):
    products = [
        ProductModel(id="a" * 24, name="Linen Shirt", category="Fashion"),
        ProductModel(id="b" * 24, name="Vitamin C Serum", category="Cosmetics"),
        ProductModel(id="c" * 24, name="Silk Scarf", category="Fashion", is_out_of_stock=True),
    ]
    session.add_all(products)
    session.commit()
    return {p.name: p.id for p in products}


def order_body(cart_items=None, phone="01711000000", payment_method="Cash on Delivery", **overrides):
    body = {
        "customerDetails": {
            "firstName": "Nadia",
            "lastName": "Rahman",
            "email": "nadia@example.com",
            "phone": phone,
            "address": "House 12, Road 4",
            "city": "Dhaka",
        },
        "cartItems": cart_items if cart_items is not None else [
            {"id": "a" * 24, "name": "Linen Shirt", "image": "shirt.jpg", "price": 500, "quantity": 2, "size": "M"},
        ],
        "total": 1100,
        "paymentInfo": {"paymentMethod": payment_method, "paymentDetails": None},
        "shippingCharge": 100,
    }
    body.update(overrides)
    return body


def make_order(**kwargs) -> OrderCreate:
    return OrderCreate.model_validate(order_body(**kwargs))
