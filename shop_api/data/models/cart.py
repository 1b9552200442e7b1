# shop_api/data/models/cart.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from shop_api.data.database import Base
from shop_api.utils.ids import new_object_id


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(String(24), primary_key=True, default=new_object_id)
    # bez unique, "jeden koszyk na usera" to tylko pierwszy znaleziony
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
    )
