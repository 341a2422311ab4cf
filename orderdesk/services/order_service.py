# orderdesk/services/order_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from orderdesk.data.models.order import OrderModel
from orderdesk.domain.errors import (
    DuplicateOrderIdError,
    EmptyCartError,
    InvalidStatusError,
    OrderIdExhaustedError,
    OrderNotFoundError,
)
from orderdesk.domain.schemas import CustomerDetails, OrderCreate, OrderStatus
from orderdesk.repos.order_repo import OrderRepo
from orderdesk.services.analytics_service import AnalyticsService
from orderdesk.services.id_allocator import OrderIdAllocator, looks_like_order_id
from orderdesk.services.notification_service import NotificationService
from orderdesk.utils.retry import order_id_retry
from orderdesk.utils.settings import ORDER_ID_MAX_ATTEMPTS
from orderdesk.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Komendy: place, update status, delete. Zapytania: list, get, stats.
    Status mozna ustawic na dowolna wartosc z OrderStatus - bez walidacji przejsc.
    """

    def __init__(
        self,
        db: Session,
        allocator: OrderIdAllocator | None = None,
        notification_service: NotificationService | None = None,
    ):
        self.db = db
        self.repo = OrderRepo(db)
        self.allocator = allocator or OrderIdAllocator(self.repo)
        self.notification_service = notification_service or NotificationService()

    # =====================================================
    # COMMANDS
    # =====================================================
    def place_order(self, payload: OrderCreate) -> OrderModel:
        """
        Use Case: Zlozenie zamowienia (checkout).

        1. Odrzuca pusty koszyk
        2. Losuje order_id i zapisuje (kolizja na UNIQUE -> nowe losowanie)
        3. Zleca powiadomienie admina (async, bledy nie psuja zamowienia)
        """
        if not payload.cart_items:
            raise EmptyCartError()

        try:
            order = self._persist_new_order(payload)
        except DuplicateOrderIdError as e:
            logger.error(f"Order id collisions exhausted {ORDER_ID_MAX_ATTEMPTS} attempts")
            raise OrderIdExhaustedError(ORDER_ID_MAX_ATTEMPTS) from e

        logger.info(f"Order {order.order_id} ({order.id}) created with {len(order.cart_items)} items")

        self.notification_service.notify_admin(order)

        return order

    @order_id_retry()
    def _persist_new_order(self, payload: OrderCreate) -> OrderModel:
        order_id = self.allocator.allocate()
        try:
            return self.repo.create_order(self._build_order(order_id, payload))
        except DuplicateOrderIdError:
            logger.warning(f"Order id {order_id} taken by a concurrent order, retrying")
            raise

    @staticmethod
    def _build_order(order_id: str, payload: OrderCreate) -> OrderModel:
        customer = payload.customer_details or CustomerDetails()
        return OrderModel(
            order_id=order_id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            city=customer.city or "",
            note=customer.note or "",
            cart_items=[item.model_dump(mode="json") for item in payload.cart_items],
            total=payload.total,
            shipping_charge=payload.shipping_charge,
            payment_method=payload.payment_info.payment_method.value,
            payment_details=payload.payment_info.payment_details,
            status=OrderStatus.PENDING.value,
        )

    def update_status(self, internal_id: str, status: OrderStatus | str) -> OrderModel:
        try:
            status = OrderStatus(status)
        except ValueError:
            raise InvalidStatusError(status) from None

        order = self.repo.update_order_status(internal_id, status.value)
        if not order:
            raise OrderNotFoundError(internal_id)

        logger.info(f"Order {order.order_id} status set to {status.value}")
        return order

    def delete_order(self, internal_id: str) -> None:
        if not self.repo.delete_order(internal_id):
            raise OrderNotFoundError(internal_id)
        logger.info(f"Order {internal_id} removed")

    # =====================================================
    # QUERY
    # =====================================================
    def list_orders(self) -> List[OrderModel]:
        return self.repo.list_orders()

    def get_order(self, ref: str) -> OrderModel:
        """
        Use Case: Pobranie zamowienia po order_id (5-7 cyfr) albo po id wewnetrznym.
        Numer, ktory nie pasuje do zadnego order_id, to po prostu brak zamowienia.
        """
        if looks_like_order_id(ref):
            order = self.repo.get_by_order_id(ref)
        else:
            order = self.repo.get_order(ref)

        if not order:
            raise OrderNotFoundError(ref)
        return order

    def get_stats(self) -> Dict[str, Any]:
        return AnalyticsService(self.db).compute_stats()
