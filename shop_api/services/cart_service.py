# shop_api/services/cart_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from shop_api.data.models.cart import CartModel
from shop_api.data.models.cart_item import CartItemModel
from shop_api.domain.errors import NotFoundError
from shop_api.repos.cart_repo import CartRepo
from shop_api.repos.product_repo import ProductRepo
from shop_api.utils.ids import is_object_id
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)

# kolumna Integer (32 bit)
MAX_QUANTITY = 2**31 - 1


def _as_quantity(quantity) -> int:
    # JSON 2.0 to nadal liczba calkowita, true/false i 1.5 juz nie
    if isinstance(quantity, bool):
        raise ValueError("Quantity must be a positive integer")
    if isinstance(quantity, float) and quantity.is_integer():
        quantity = int(quantity)
    if not isinstance(quantity, int) or not 0 < quantity <= MAX_QUANTITY:
        raise ValueError("Quantity must be a positive integer")
    return quantity


class CartService:
    """
    Koszyk usera: odczyt (z filtrowaniem wiszacych referencji do produktow),
    dodawanie i usuwanie itemow.
    Brak transakcji miedzy koszykiem, itemami i produktami.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def get_cart(self, user_id: str | None) -> Dict[str, Any]:
        if not user_id:
            raise ValueError("userId is required")

        cart = self.repo.get_cart_by_user(user_id, with_items=True)
        if not cart:
            return {"items": []}

        # produkt usuniety -> item.product is None; pomijamy go, ale nie kasujemy z bazy
        items = [i for i in cart.items if i.product is not None]
        dropped = len(cart.items) - len(items)
        if dropped:
            logger.info(f"Koszyk {cart.id}: pominieto {dropped} itemow z usunietym produktem")

        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "created_at": cart.created_at,
            "items": items,
        }

    #commands
    def add_item(self, user_id: str | None, product_id: str | None, quantity) -> CartItemModel:
        if not user_id or not product_id or quantity is None:
            raise ValueError("userId, productId, and quantity are required")

        quantity = _as_quantity(quantity)

        if not is_object_id(product_id):
            raise ValueError("Invalid product ID format")

        if not self.products.get_product(product_id):
            raise NotFoundError("Product not found")

        cart = self.repo.get_cart_by_user(user_id)
        if not cart:
            cart = self.repo.create_cart(CartModel(user_id=user_id))
            logger.info(f"Utworzono nowy koszyk {cart.id} dla uzytkownika {user_id}")

        # zawsze nowa linia, bez sumowania ilosci z istniejaca
        item = self.repo.add_cart_item(
            CartItemModel(
                cart_id=cart.id,
                product_id=product_id,
                quantity=quantity,
            )
        )
        logger.info(f"Dodano produkt {product_id} x{quantity} do koszyka {cart.id}")
        return item

    def remove_item(self, item_id: str) -> None:
        if not is_object_id(item_id):
            raise ValueError("Invalid item ID format")

        item = self.repo.get_cart_item(item_id)
        if not item:
            raise NotFoundError("Cart item not found")

        cart_id = item.cart_id
        self.repo.delete_cart_item(item)
        logger.info(f"Usunieto item {item_id} z koszyka {cart_id}")
