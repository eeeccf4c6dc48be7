"""Security utilities - DRY principle"""
from typing import Any, Optional
from bson import ObjectId

def to_object_id(obj_id: Any) -> Optional[ObjectId]:
    """Return ObjectId for a well-formed identifier, None otherwise"""
    if isinstance(obj_id, ObjectId):
        return obj_id
    # dicts and other non-string values are rejected (NoSQL injection attempt)
    if not isinstance(obj_id, str) or not ObjectId.is_valid(obj_id):
        return None
    return ObjectId(obj_id)
