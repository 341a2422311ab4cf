from sqlalchemy import Column, String, DateTime, Date, Numeric, JSON, Text, UniqueConstraint
from datetime import datetime, timezone

from orderdesk.data.database import Base, new_object_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _today():
    return _utcnow().date()


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(24), primary_key=True, default=new_object_id)
    order_id = Column(String(7), nullable=False)

    first_name = Column(String)
    last_name = Column(String)
    email = Column(String)
    phone = Column(String, index=True)
    address = Column(Text)
    city = Column(String, nullable=False, default="")
    note = Column(Text, nullable=False, default="")

    # pozycje koszyka jako dokument: [{id, name, image, price, quantity, size}]
    cart_items = Column(JSON, nullable=False)
    total = Column(Numeric(12, 2), nullable=False)
    shipping_charge = Column(Numeric(12, 2), nullable=False, default=0)

    payment_method = Column(String)  # Online, Cash on Delivery
    payment_details = Column(JSON)

    date = Column(Date, nullable=False, default=_today)
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True)
    status = Column(String(20), nullable=False, default="Pending")  # Pending, Confirmed, Shipped, Delivered, Cancelled

    __table_args__ = (UniqueConstraint("order_id", name="uq_orders_order_id"),)
