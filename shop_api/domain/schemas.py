# shop_api/domain/schemas.py
from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON w camelCase (userId, imageUrl...), atrybuty w snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# wejscie: typy luzne, reguly (wymagane pola, liczby > 0) sprawdzaja serwisy

class CategoryIn(CamelModel):
    name: Any = None


class ProductIn(CamelModel):
    title: str | None = None
    description: str | None = None
    price: Any = None
    image_url: str | None = None
    category_name: str | None = None


class CartItemIn(CamelModel):
    user_id: str | None = None
    product_id: str | None = None
    quantity: Any = None


# wyjscie

class CategoryOut(CamelModel):
    id: str
    name: str


class ProductOut(CamelModel):
    id: str
    title: str
    description: str
    price: float
    image_url: str
    category_id: str
    created_at: datetime
    category: CategoryOut | None = None


class CartItemOut(CamelModel):
    id: str
    cart_id: str
    product_id: str
    quantity: int


class CartLineOut(CartItemOut):
    product: ProductOut


class CartOut(CamelModel):
    id: str | None = None
    user_id: str | None = None
    created_at: datetime | None = None
    items: List[CartLineOut]


class MessageOut(BaseModel):
    message: str


class HealthOut(BaseModel):
    status: str
    database: str
