from sqlalchemy import Column, String, Boolean

from orderdesk.data.database import Base, new_object_id


class ProductModel(Base):
    """Katalog produktow - tu tylko do odczytu (kategoria + liczniki)."""

    __tablename__ = "products"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, default="Fashion")
    is_out_of_stock = Column(Boolean, nullable=False, default=False)
