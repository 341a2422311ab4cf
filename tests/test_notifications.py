import smtplib

import pytest

from conftest import make_order
from orderdesk.services import notification_service
from orderdesk.services.notification_service import (
    NotificationService,
    build_order_email,
    send_order_email_task,
)
from orderdesk.services.order_service import OrderService

ORDER = {
    "orderId": "482913",
    "firstName": "Nadia",
    "phone": "01711000000",
    "address": "House 12, Road 4",
    "paymentMethod": "Online",
    "cartItems": [
        {"id": "a" * 24, "name": "Linen Shirt", "image": "shirt.jpg", "price": 500, "quantity": 2, "size": "M"},
        {"id": "b" * 24, "name": "<b>Serum</b>", "image": "serum.jpg", "price": 300, "quantity": 1, "size": None},
    ],
    "total": 1400,
}


class FakeSMTP:
    sent = []

    def __init__(self, host, port, timeout=None):
        self.host = host

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def login(self, user, password):
        pass

    def send_message(self, message):
        FakeSMTP.sent.append(message)


class RejectingSMTP(FakeSMTP):
    def send_message(self, message):
        raise smtplib.SMTPRecipientsRefused({})


@pytest.fixture
def smtp_credentials(monkeypatch):
    monkeypatch.setattr(notification_service, "GMAIL_USER", "desk@example.com")
    monkeypatch.setattr(notification_service, "GMAIL_PASS", "app-password")
    monkeypatch.setattr(notification_service, "ADMIN_NOTIFY_EMAIL", "")
    FakeSMTP.sent = []


def test_email_summarises_order_with_products_subtotal():
    message = build_order_email(ORDER, sender="desk@example.com", recipient="owner@example.com")
    body = message.get_body(preferencelist=("html",)).get_content()

    assert message["Subject"] == "New Order #482913"
    assert message["To"] == "owner@example.com"
    assert "Nadia" in body and "01711000000" in body
    assert "৳1,000.00" in body
    # suma produktow bez dostawy
    assert "Total Payable: ৳1,300.00" in body
    assert "&lt;b&gt;Serum&lt;/b&gt;" in body


def test_task_is_noop_without_credentials(monkeypatch):
    monkeypatch.setattr(notification_service, "GMAIL_USER", "")
    monkeypatch.setattr(notification_service, "GMAIL_PASS", "")

    result = send_order_email_task(ORDER)

    assert result["status"] == "skipped"


def test_task_sends_mail(monkeypatch, smtp_credentials):
    monkeypatch.setattr(notification_service.smtplib, "SMTP_SSL", FakeSMTP)

    result = send_order_email_task(ORDER)

    assert result["status"] == "sent"
    assert FakeSMTP.sent[0]["To"] == "desk@example.com"


def test_task_swallows_transport_failure(monkeypatch, smtp_credentials):
    monkeypatch.setattr(notification_service.smtplib, "SMTP_SSL", RejectingSMTP)

    result = send_order_email_task(ORDER)

    assert result["status"] == "failed"


def test_notify_admin_queues_serialised_order(session, queued_notifications):
    order = OrderService(session).place_order(make_order())

    queued_notifications.payloads.clear()
    assert NotificationService().notify_admin(order) is True

    payload = queued_notifications.payloads[0]
    assert payload["orderId"] == order.order_id
    assert payload["cartItems"][0]["price"] == 500
    assert payload["status"] == "Pending"


def test_notification_task_never_runs_inline():
    from orderdesk.celery_worker import celery_app

    assert celery_app.conf.task_always_eager is False
