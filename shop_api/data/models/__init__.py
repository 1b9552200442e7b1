#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from shop_api.data.models.category import CategoryModel
from shop_api.data.models.product import ProductModel
from shop_api.data.models.cart import CartModel
from shop_api.data.models.cart_item import CartItemModel

__all__ = ["CategoryModel", "ProductModel", "CartModel", "CartItemModel"]
