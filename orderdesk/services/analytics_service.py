# orderdesk/services/analytics_service.py
import re
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.orm import Session

from orderdesk.domain.schemas import OrderStatus, PaymentMethod
from orderdesk.repos.order_repo import OrderRepo
from orderdesk.repos.product_repo import ProductRepo
from orderdesk.utils.logging import get_logger

logger = get_logger(__name__)

COSMETICS_CATEGORY = "Cosmetics"
FALLBACK_CATEGORY = "Other"

# heurystyka po nazwie pozycji - tylko do licznika zamowien kosmetycznych,
# przychod dzielony jest osobno po kategorii produktu
COSMETICS_NAME_PATTERN = re.compile(r"cosmetic|beauty|serum|lip", re.IGNORECASE)


def _to_decimal(value) -> Decimal:
    return Decimal(str(value if value is not None else 0))


class AnalyticsService:
    """
    Statystyki dashboardu liczone zawsze na zywo z tabeli zamowien.
    Kazda liczba to osobny odczyt - bez transakcji obejmujacej calosc.
    """

    def __init__(self, db: Session):
        self.orders = OrderRepo(db)
        self.products = ProductRepo(db)

    def compute_stats(self) -> Dict[str, Any]:
        total_orders = self.orders.count_orders()
        online_transactions = self.orders.count_by_payment_method(PaymentMethod.ONLINE.value)
        total_products = self.products.count_products()
        out_of_stock_count = self.products.count_out_of_stock()
        customer_count = self.orders.count_distinct_phones()

        revenue = self.revenue_split()
        cosmetics_orders = self.count_cosmetics_orders()

        return {
            "total_orders": total_orders,
            "online_transactions": online_transactions,
            "total_revenue": revenue["total_revenue"],
            "total_products": total_products,
            "out_of_stock_count": out_of_stock_count,
            "fashion_revenue": revenue["fashion_revenue"],
            "cosmetics_revenue": revenue["cosmetics_revenue"],
            "fashion_orders": total_orders - cosmetics_orders,
            "cosmetics_orders": cosmetics_orders,
            "customer_count": customer_count,
        }

    def revenue_split(self) -> Dict[str, Decimal]:
        """
        Przychod z pozycji koszyka (price * quantity) bez zamowien anulowanych.
        Kategoria z katalogu po id produktu, brak dopasowania -> "Other" (liczone jako fashion).
        """
        lines = list(self.orders.iter_cart_items(exclude_status=OrderStatus.CANCELLED.value))
        categories = self.products.categories_for(line.get("id") for line in lines)

        cosmetics = Decimal("0.00")
        fashion = Decimal("0.00")
        for line in lines:
            amount = _to_decimal(line.get("price")) * _to_decimal(line.get("quantity"))
            category = categories.get(str(line.get("id")), FALLBACK_CATEGORY)
            if category == COSMETICS_CATEGORY:
                cosmetics += amount
            else:
                fashion += amount

        return {
            "total_revenue": cosmetics + fashion,
            "cosmetics_revenue": cosmetics,
            "fashion_revenue": fashion,
        }

    def count_cosmetics_orders(self) -> int:
        return sum(
            1
            for names in self.orders.iter_cart_item_names()
            if any(COSMETICS_NAME_PATTERN.search(name) for name in names)
        )
