# shop_api/repos/product_repo.py
from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from shop_api.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self, category_id: str | None = None, search: str | None = None) -> list[ProductModel]:
        stmt = select(ProductModel).options(joinedload(ProductModel.category))

        if category_id is not None:
            stmt = stmt.where(ProductModel.category_id == category_id)
        if search:
            stmt = stmt.where(ProductModel.title.icontains(search, autoescape=True))

        stmt = stmt.order_by(ProductModel.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id, options=[joinedload(ProductModel.category)])

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product: ProductModel, data: Dict[str, Any]) -> ProductModel:
        for key, value in data.items():
            setattr(product, key, value)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.commit()
