"""Thin persistence layer over the MongoDB collections."""
from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: str):
    """Parse a hex id, returning None for anything that is not one."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
