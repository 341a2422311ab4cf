# orderdesk/services/notification_service.py
import html
import smtplib
from decimal import Decimal
from email.message import EmailMessage
from typing import Any, Dict

from orderdesk.celery_worker import celery_app
from orderdesk.data.models.order import OrderModel
from orderdesk.domain.schemas import OrderOut
from orderdesk.utils.settings import (
    ADMIN_NOTIFY_EMAIL,
    GMAIL_PASS,
    GMAIL_USER,
    SMTP_HOST,
    SMTP_PORT,
    SMTP_TIMEOUT,
)
from orderdesk.utils.logging import get_logger

logger = get_logger(__name__)

SENDER_NAME = "Order Desk"
CURRENCY = "৳"


class NotificationService:
    """
    Serwis do wysyłania powiadomień.
    Używa Celery do asynchronicznego przetwarzania - tworzenie zamowienia
    tylko zleca zadanie, nie czeka na wysylke i nie widzi jej bledow.
    """

    def notify_admin(self, order: OrderModel) -> bool:
        try:
            payload = OrderOut.model_validate(order).model_dump(mode="json", by_alias=True)
            send_order_email_task.delay(payload)
        except Exception as e:
            logger.warning(f"Could not queue notification for order {order.order_id}: {e}")
            return False

        logger.info(f"Notification for order {order.order_id} queued")
        return True


def _money(value: Any) -> str:
    return f"{CURRENCY}{Decimal(str(value or 0)):,.2f}"


def _esc(value: Any) -> str:
    return html.escape(str(value if value is not None else ""))


def _line_total(item: Dict[str, Any]) -> Decimal:
    return Decimal(str(item.get("price") or 0)) * Decimal(str(item.get("quantity") or 0))


def build_order_email(order: Dict[str, Any], sender: str, recipient: str) -> EmailMessage:
    """
    Mail do admina: dane klienta, pozycje z wartoscia price * quantity
    i suma produktow (bez dostawy).
    """
    items = order.get("cartItems") or []
    subtotal = sum((_line_total(item) for item in items), Decimal("0.00"))

    rows = "".join(
        f"""
    <tr>
      <td style="padding: 12px; border-bottom: 1px solid #eee;"><img src="{_esc(item.get('image'))}" width="50" style="border-radius: 4px;" /></td>
      <td style="padding: 12px; border-bottom: 1px solid #eee;">
        <div style="font-weight: bold; font-size: 14px;">{_esc(item.get('name'))}</div>
        <div style="font-size: 12px; color: #666;">Size: {_esc(item.get('size'))} | Qty: {_esc(item.get('quantity'))}</div>
      </td>
      <td style="padding: 12px; border-bottom: 1px solid #eee; text-align: right; font-weight: bold;">{_money(_line_total(item))}</td>
    </tr>"""
        for item in items
    )

    order_id = _esc(order.get("orderId"))
    body = f"""<div style="font-family: sans-serif; max-width: 600px; margin: auto; border: 1px solid #eee; border-radius: 12px; overflow: hidden;">
  <div style="background: #db2777; padding: 20px; color: white; text-align: center;"><h1>New Order!</h1><p>ID: #{order_id}</p></div>
  <div style="padding: 20px;">
    <h3>Customer Details</h3>
    <p>Name: {_esc(order.get('firstName'))}<br>Phone: {_esc(order.get('phone'))}<br>Address: {_esc(order.get('address'))}<br>Payment: {_esc(order.get('paymentMethod'))}</p>
    <table width="100%">{rows}</table>
    <div style="text-align: right; padding: 20px; background: #f9f9f9; margin-top: 10px;">
      <strong>Total Payable: {_money(subtotal)}</strong>
    </div>
  </div>
</div>"""

    message = EmailMessage()
    message["Subject"] = f"New Order #{order.get('orderId')}"
    message["From"] = f'"{SENDER_NAME}" <{sender}>'
    message["To"] = recipient
    message["X-Priority"] = "1"
    message.set_content(f"New order #{order.get('orderId')}, products subtotal {_money(subtotal)}")
    message.add_alternative(body, subtype="html")
    return message


@celery_app.task(name="orderdesk.services.notification_service.send_order_email_task")
def send_order_email_task(order: Dict[str, Any]) -> Dict[str, Any]:
    """
    Celery task - wysyla maila do admina przez SMTP.
    Brak danych logowania = cichy no-op. Blad wysylki jest logowany i porzucany.
    """
    order_id = order.get("orderId")

    if not GMAIL_USER or not GMAIL_PASS:
        logger.info(f"[NOTIFICATION] Mail transport not configured, skipping order {order_id}")
        return {"order_id": order_id, "status": "skipped"}

    message = build_order_email(order, sender=GMAIL_USER, recipient=ADMIN_NOTIFY_EMAIL or GMAIL_USER)

    try:
        with smtplib.SMTP_SSL(SMTP_HOST, SMTP_PORT, timeout=SMTP_TIMEOUT) as smtp:
            smtp.login(GMAIL_USER, GMAIL_PASS)
            smtp.send_message(message)
    except Exception as e:
        logger.warning(f"[NOTIFICATION] Failed to send mail for order {order_id}: {e}")
        return {"order_id": order_id, "status": "failed", "error": str(e)}

    logger.info(f"[NOTIFICATION] Admin notified about order {order_id}")
    return {"order_id": order_id, "status": "sent"}
