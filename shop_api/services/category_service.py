# shop_api/services/category_service.py
from sqlalchemy.orm import Session

from shop_api.data.models.category import CategoryModel
from shop_api.domain.errors import ConflictError
from shop_api.repos.category_repo import CategoryRepo
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.repo = CategoryRepo(db)

    def list_categories(self) -> list[CategoryModel]:
        return self.repo.list_categories()

    def resolve(self, name: str) -> CategoryModel | None:
        """Kategoria po nazwie: trim + dokladne dopasowanie bez wielkosci liter."""
        return self.repo.find_by_name(name.strip())

    def create_category(self, name) -> CategoryModel:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Category name is required")

        trimmed = name.strip()
        if self.resolve(trimmed):
            raise ConflictError("Category already exists")

        created = self.repo.create_category(CategoryModel(name=trimmed))
        logger.info(f"Utworzono kategorie {created.id} '{created.name}'")
        return created
