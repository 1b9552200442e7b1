# shop_api/repos/category_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from shop_api.data.models.category import CategoryModel


class CategoryRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> list[CategoryModel]:
        return list(self.db.execute(select(CategoryModel)).scalars().all())

    def find_by_name(self, name: str) -> CategoryModel | None:
        #porownanie bez wielkosci liter (casefold, takze poza ASCII), pierwszy pasujacy
        stmt = (
            select(CategoryModel)
            .where(CategoryModel.name_key == name.casefold())
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def create_category(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category
