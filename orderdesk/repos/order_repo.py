# orderdesk/repos/order_repo.py
from typing import Iterator, List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from orderdesk.data.models.order import OrderModel
from orderdesk.domain.errors import DuplicateOrderIdError


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # tylko UNIQUE na order_id jest kolizja do ponowienia
            if "order_id" in str(e.orig):
                raise DuplicateOrderIdError(order.order_id) from e
            raise
        self.db.refresh(order)
        return order

    def get_order(self, internal_id: str) -> OrderModel | None:
        return self.db.get(OrderModel, internal_id)

    def get_by_order_id(self, order_id: str) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel).where(OrderModel.order_id == order_id)
        ).scalar_one_or_none()

    def order_id_exists(self, order_id: str) -> bool:
        return self.db.execute(
            select(OrderModel.id).where(OrderModel.order_id == order_id).limit(1)
        ).first() is not None

    def list_orders(self) -> List[OrderModel]:
        # najnowsze pierwsze, stare rekordy bez created_at sortowane po date
        return list(
            self.db.execute(
                select(OrderModel).order_by(
                    OrderModel.created_at.desc().nulls_last(),
                    OrderModel.date.desc(),
                )
            ).scalars().all()
        )

    def update_order_status(self, internal_id: str, status: str) -> OrderModel | None:
        order = self.get_order(internal_id)
        if order:
            order.status = status
            self.db.commit()
            self.db.refresh(order)
        return order

    def delete_order(self, internal_id: str) -> bool:
        order = self.get_order(internal_id)
        if not order:
            return False
        self.db.delete(order)
        self.db.commit()
        return True

    # =====================================================
    # ODCZYTY DLA STATYSTYK
    # =====================================================
    def count_orders(self) -> int:
        return self.db.execute(select(func.count(OrderModel.id))).scalar_one()

    def count_by_payment_method(self, payment_method: str) -> int:
        return self.db.execute(
            select(func.count(OrderModel.id)).where(OrderModel.payment_method == payment_method)
        ).scalar_one()

    def count_distinct_phones(self) -> int:
        return self.db.execute(
            select(func.count(func.distinct(OrderModel.phone)))
        ).scalar_one()

    def iter_cart_items(self, exclude_status: str | None = None) -> Iterator[dict]:
        stmt = select(OrderModel.cart_items)
        if exclude_status is not None:
            stmt = stmt.where(OrderModel.status != exclude_status)
        for (items,) in self.db.execute(stmt):
            yield from items or []

    def iter_cart_item_names(self) -> Iterator[List[str]]:
        """Nazwy pozycji, jedna lista na zamowienie."""
        for (items,) in self.db.execute(select(OrderModel.cart_items)):
            yield [str(item.get("name") or "") for item in items or []]
