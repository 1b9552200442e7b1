# shop_api/data/models/product.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from shop_api.data.database import Base
from shop_api.utils.ids import new_object_id


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(24), primary_key=True, default=new_object_id)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    image_url = Column(String, nullable=False)
    category_id = Column(String(24), ForeignKey("categories.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    category = relationship("CategoryModel")
