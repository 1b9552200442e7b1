# shop_api/data/seed.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from shop_api.data.database import SessionLocal
from shop_api.data.models.category import CategoryModel
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORIES = ("Mobiles", "Laptops", "Shoes", "Books")


def seed(db: Session | None = None) -> int:
    own_session = db is None
    db = db or SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.execute(select(CategoryModel.id).limit(1)).first():
            return 0
        for name in DEFAULT_CATEGORIES:
            db.add(CategoryModel(name=name))
        db.commit()
        logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} categories")
        return len(DEFAULT_CATEGORIES)
    finally:
        if own_session:
            db.close()
