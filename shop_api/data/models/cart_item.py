from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from shop_api.data.database import Base
from shop_api.utils.ids import new_object_id


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(String(24), primary_key=True, default=new_object_id)
    cart_id = Column(String(24), ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    # bez FK: item moze przezyc usuniety produkt
    product_id = Column(String(24), nullable=False)

    quantity = Column(Integer, nullable=False)

    cart = relationship("CartModel", back_populates="items")
    product = relationship(
        "ProductModel",
        primaryjoin="foreign(CartItemModel.product_id) == ProductModel.id",
        viewonly=True,
    )
