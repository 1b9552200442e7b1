# shop_api/services/product_service.py
import math
from typing import Any, Dict

from sqlalchemy.orm import Session

from shop_api.data.models.product import ProductModel
from shop_api.domain.errors import NotFoundError
from shop_api.domain.schemas import ProductIn
from shop_api.repos.product_repo import ProductRepo
from shop_api.services.category_service import CategoryService
from shop_api.utils.ids import is_object_id
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


def _check_price(price) -> None:
    # bool to podklasa int, ale cena z true/false nie ma sensu
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValueError("Price must be a positive number")
    # JSON przepuszcza NaN i Infinity
    if not math.isfinite(price) or price <= 0:
        raise ValueError("Price must be a positive number")


def _check_image_url(image_url: str) -> None:
    if not image_url.startswith("http"):
        raise ValueError("imageUrl must be a valid URL")


class ProductService:
    """
    CRUD produktow, kategoria podawana po nazwie (categoryName)
    i zamieniana na id przez CategoryService.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)
        self.categories = CategoryService(db)

    #query
    def list_products(self, category: str | None = None, search: str | None = None) -> list[ProductModel]:
        category_id = None
        if category:
            cat = self.categories.resolve(category)
            if not cat:
                # nieznana kategoria -> brak produktow, nie blad
                return []
            category_id = cat.id

        return self.repo.list_products(category_id=category_id, search=search)

    def get_product(self, product_id: str) -> ProductModel:
        return self._get_existing(product_id)

    #commands
    def create_product(self, payload: ProductIn) -> ProductModel:
        fields = [payload.title, payload.description, payload.image_url, payload.category_name]
        if not all(f and f.strip() for f in fields) or not payload.price:
            raise ValueError("All fields are required")

        _check_price(payload.price)
        _check_image_url(payload.image_url.strip())

        category = self.categories.resolve(payload.category_name)
        if not category:
            raise NotFoundError("Category not found")

        created = self.repo.create_product(
            ProductModel(
                title=payload.title.strip(),
                description=payload.description.strip(),
                price=payload.price,
                image_url=payload.image_url.strip(),
                category_id=category.id,
            )
        )
        logger.info(f"Utworzono produkt {created.id} w kategorii {category.name}")
        return created

    def update_product(self, product_id: str, payload: ProductIn) -> ProductModel:
        product = self._get_existing(product_id)

        data: Dict[str, Any] = {}
        # puste stringi ignorujemy, tak jak brak pola
        if payload.title:
            data["title"] = payload.title.strip()
        if payload.description:
            data["description"] = payload.description.strip()

        # jawne "price": null to blad, brak pola nie
        if "price" in payload.model_fields_set:
            _check_price(payload.price)
            data["price"] = payload.price

        if payload.image_url:
            _check_image_url(payload.image_url.strip())
            data["image_url"] = payload.image_url.strip()

        if payload.category_name:
            category = self.categories.resolve(payload.category_name)
            if not category:
                raise NotFoundError("Category not found")
            data["category_id"] = category.id

        updated = self.repo.update_product(product, data)
        logger.info(f"Zaktualizowano produkt {product_id}: {sorted(data)}")
        return updated

    def delete_product(self, product_id: str) -> None:
        product = self._get_existing(product_id)
        # itemy koszykow z tym produktem zostaja, GET /cart je odfiltruje
        self.repo.delete_product(product)
        logger.info(f"Usunieto produkt {product_id}")

    def _get_existing(self, product_id: str) -> ProductModel:
        if not is_object_id(product_id):
            raise ValueError("Invalid product ID format")

        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product
