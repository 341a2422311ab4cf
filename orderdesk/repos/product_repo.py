# orderdesk/repos/product_repo.py
from typing import Dict, Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from orderdesk.data.models.product import ProductModel


class ProductRepo:
    """Odczyt katalogu produktow, serwis zamowien niczego tu nie zapisuje."""

    def __init__(self, db: Session):
        self.db = db

    def count_products(self) -> int:
        return self.db.execute(select(func.count(ProductModel.id))).scalar_one()

    def count_out_of_stock(self) -> int:
        return self.db.execute(
            select(func.count(ProductModel.id)).where(ProductModel.is_out_of_stock.is_(True))
        ).scalar_one()

    def categories_for(self, product_ids: Iterable[str]) -> Dict[str, str]:
        ids = {str(pid) for pid in product_ids if pid is not None}
        if not ids:
            return {}
        rows = self.db.execute(
            select(ProductModel.id, ProductModel.category).where(ProductModel.id.in_(ids))
        ).all()
        return {pid: category for pid, category in rows}
