# shop_api/repos/cart_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from shop_api.data.models.cart import CartModel
from shop_api.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_user(self, user_id: str, with_items: bool = False) -> CartModel | None:
        stmt = select(CartModel).where(CartModel.user_id == user_id).order_by(CartModel.created_at).limit(1)
        if with_items:
            #items + produkt kazdego itemu (None gdy produkt usuniety)
            stmt = stmt.options(
                selectinload(CartModel.items).selectinload(CartItemModel.product)
            )
        return self.db.execute(stmt).scalars().first()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart

    def get_cart_item(self, item_id: str) -> CartItemModel | None:
        return self.db.get(CartItemModel, item_id)

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_cart_item(self, item: CartItemModel) -> None:
        self.db.delete(item)
        self.db.commit()
