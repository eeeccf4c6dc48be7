"""Response serialization for stored records (ObjectIds, UTC instants, dates)"""
from datetime import date, datetime
from typing import Any
from bson import ObjectId
from school_records.utils.time.timeutils import to_naive_utc

def format_utc(dt: datetime) -> str:
    """Stored instants are naive UTC; write them with an explicit Z suffix"""
    return to_naive_utc(dt).isoformat() + "Z"

def serialize_value(obj: Any) -> Any:
    if isinstance(obj, ObjectId):
        return str(obj)
    if isinstance(obj, datetime):
        return format_utc(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {key: serialize_value(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [serialize_value(item) for item in obj]
    return obj

def sanitize_mongo_document(doc: Any) -> Any:
    """Projected records or histograms to JSON-ready values; None stays None"""
    if doc is None:
        return None
    return serialize_value(doc)
