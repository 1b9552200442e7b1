from sqlalchemy import Column, String
from sqlalchemy.orm import validates

from shop_api.data.database import Base
from shop_api.utils.ids import new_object_id


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(24), primary_key=True, default=new_object_id)
    # unikalnosc (bez wielkosci liter) pilnuje CategoryService, nie baza
    name = Column(String, nullable=False)
    # name.casefold(), lower() w SQLite zna tylko ASCII
    name_key = Column(String, nullable=False, index=True)

    @validates("name")
    def _set_name_key(self, key, value):
        self.name_key = value.casefold()
        return value
