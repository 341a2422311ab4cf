#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from orderdesk.data.models.order import OrderModel
from orderdesk.data.models.product import ProductModel

__all__ = ["OrderModel", "ProductModel"]
