# orderdesk/domain/schemas.py
from datetime import date as Date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OrderStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class PaymentMethod(str, Enum):
    ONLINE = "Online"
    CASH_ON_DELIVERY = "Cash on Delivery"


class CamelModel(BaseModel):
    """JSON po stronie klienta jest w camelCase, w Pythonie snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CustomerDetails(CamelModel):
    """Dane klienta z formularza checkout."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = Field(None, description="Klucz do liczenia unikalnych klientow")
    address: str | None = None
    city: str | None = None
    note: str | None = None


class CartItemIn(CamelModel):
    """Pozycja koszyka - ceny przyjmowane od klienta bez weryfikacji w katalogu."""

    id: str = Field(..., min_length=1, description="ID produktu w katalogu")
    name: str
    image: str | None = None
    price: float = Field(..., ge=0)
    quantity: int = Field(..., gt=0)
    size: str | None = None


class CartItemOut(CamelModel):
    id: str
    name: str
    image: str | None = None
    price: float
    quantity: int
    size: str | None = None


class PaymentInfo(CamelModel):
    payment_method: PaymentMethod
    payment_details: Any = None


class OrderCreate(CamelModel):
    """Schema dla skladania zamowienia (checkout)."""

    customer_details: CustomerDetails | None = None
    # pusta lista przechodzi walidacje schematu, odrzuca ja serwis (400)
    cart_items: List[CartItemIn] = Field(default_factory=list)
    total: Decimal = Field(..., ge=0, description="Suma z dostawa, liczona przez klienta")
    payment_info: PaymentInfo
    shipping_charge: Decimal = Field(Decimal("0"), ge=0)


class StatusUpdate(CamelModel):
    status: OrderStatus


class OrderOut(CamelModel):
    """Schema dla zamowienia (response)."""

    id: str
    order_id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str = ""
    note: str = ""
    cart_items: List[CartItemOut]
    total: float
    shipping_charge: float
    payment_method: str | None = None
    payment_details: Any = None
    date: Date
    created_at: datetime | None = None
    status: OrderStatus


class StatsOut(CamelModel):
    """Statystyki dashboardu admina."""

    total_orders: int
    online_transactions: int
    total_revenue: float
    total_products: int
    out_of_stock_count: int
    fashion_revenue: float
    cosmetics_revenue: float
    fashion_orders: int
    cosmetics_orders: int
    customer_count: int


class MessageOut(BaseModel):
    message: str
