from decimal import Decimal

from conftest import make_order
from orderdesk.services.analytics_service import AnalyticsService
from orderdesk.services.order_service import OrderService

SHIRT = {"id": "a" * 24, "name": "Linen Shirt", "price": 500, "quantity": 2}
SERUM = {"id": "b" * 24, "name": "Vitamin C Serum", "price": 300, "quantity": 1}


def test_stats_on_empty_store_are_zero(session):
    stats = AnalyticsService(session).compute_stats()

    assert stats == {
        "total_orders": 0,
        "online_transactions": 0,
        "total_revenue": Decimal("0"),
        "total_products": 0,
        "out_of_stock_count": 0,
        "fashion_revenue": Decimal("0"),
        "cosmetics_revenue": Decimal("0"),
        "fashion_orders": 0,
        "cosmetics_orders": 0,
        "customer_count": 0,
    }


def test_revenue_split_by_catalog_category(session, catalog):
    OrderService(session).place_order(make_order(cart_items=[SHIRT, SERUM]))

    stats = AnalyticsService(session).compute_stats()

    assert stats["total_revenue"] == Decimal("1300")
    assert stats["fashion_revenue"] == Decimal("1000")
    assert stats["cosmetics_revenue"] == Decimal("300")
    assert stats["total_revenue"] == stats["fashion_revenue"] + stats["cosmetics_revenue"]
    assert stats["total_products"] == 3
    assert stats["out_of_stock_count"] == 1


def test_unknown_product_counts_as_other_in_fashion_revenue(session, catalog):
    ghost = {"id": "deleted-product", "name": "Lip Tint", "price": "199.99", "quantity": 3}
    OrderService(session).place_order(make_order(cart_items=[ghost]))

    stats = AnalyticsService(session).compute_stats()

    assert stats["fashion_revenue"] == Decimal("599.97")
    assert stats["cosmetics_revenue"] == Decimal("0")
    # nazwa "Lip" liczy zamowienie jako kosmetyczne mimo braku kategorii
    assert stats["cosmetics_orders"] == 1


def test_cancelled_orders_excluded_from_revenue_only(session, catalog):
    svc = OrderService(session)
    svc.place_order(make_order(cart_items=[SHIRT], phone="111"))
    cancelled = svc.place_order(make_order(cart_items=[SERUM], phone="222"))
    svc.update_status(cancelled.id, "Cancelled")

    stats = AnalyticsService(session).compute_stats()

    assert stats["total_revenue"] == Decimal("1000")
    assert stats["cosmetics_revenue"] == Decimal("0")
    assert stats["fashion_revenue"] == Decimal("1000")
    assert stats["total_orders"] == 2
    assert stats["customer_count"] == 2


def test_customer_count_uses_exact_phone_strings(session):
    svc = OrderService(session)
    for phone in ["01711000000", "01711000000", "+8801711000000", "01711 000000"]:
        svc.place_order(make_order(phone=phone))

    assert AnalyticsService(session).compute_stats()["customer_count"] == 3


def test_online_and_order_category_counts(session):
    svc = OrderService(session)
    svc.place_order(make_order(cart_items=[SHIRT], payment_method="Online"))
    svc.place_order(make_order(cart_items=[SERUM, SHIRT], payment_method="Online"))
    svc.place_order(make_order(cart_items=[{**SHIRT, "name": "BEAUTY Kit"}]))

    stats = AnalyticsService(session).compute_stats()

    assert stats["total_orders"] == 3
    assert stats["online_transactions"] == 2
    assert stats["cosmetics_orders"] == 2
    assert stats["fashion_orders"] == 1
