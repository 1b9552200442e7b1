# shop_api/utils/ids.py
from bson import ObjectId


def new_object_id() -> str:
    return str(ObjectId())


def is_object_id(value) -> bool:
    """24 znaki hex, tak jak ObjectId w Mongo."""
    return isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)
