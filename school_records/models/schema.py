"""Record schemas: field rules applied on the write path"""
import copy
import re
from datetime import datetime
from typing import Any, Dict, Optional
from bson import ObjectId
from school_records.exceptions.exceptions import ValidationError
from school_records.utils.time.timeutils import parse_datetime, now_utc

MISSING = object()


class Field:
    """Declarative rules for one document field"""

    def __init__(self, type_, required: bool = False, default: Any = MISSING,
                 max_length: Optional[int] = None, match: Optional[str] = None,
                 trim: bool = False, lowercase: bool = False, choices=None):
        self.type = type_
        self.required = required
        self.default = default
        self.max_length = max_length
        self.match: Optional[re.Pattern] = re.compile(match) if match else None
        self.trim = trim
        self.lowercase = lowercase
        self.choices = tuple(choices) if choices else None

    def has_default(self) -> bool:
        return self.default is not MISSING

    def cast(self, name: str, value: Any) -> Any:
        """Cast to the declared type, raising ValueError with a readable reason"""
        if self.type is str:
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string")
            if self.trim:
                value = value.strip()
            if self.lowercase:
                value = value.lower()
            return value
        if self.type is bool:
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a boolean")
            return value
        if self.type is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer")
            return value
        if self.type is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number")
            return value
        if self.type is datetime:
            return parse_datetime(value)
        if self.type is ObjectId:
            if isinstance(value, ObjectId):
                return value
            if isinstance(value, str) and ObjectId.is_valid(value):
                return ObjectId(value)
            raise ValueError(f"{name} must be a valid ObjectId")
        raise TypeError(f"Unsupported field type for {name}: {self.type!r}")

    def check(self, name: str, value: Any) -> None:
        if self.max_length is not None and len(value) > self.max_length:
            raise ValueError(f"{name} must be at most {self.max_length} characters")
        if self.match is not None and not self.match.match(value):
            raise ValueError(f"{name} has an invalid format")
        if self.choices is not None and value not in self.choices:
            raise ValueError(f"{name} must be one of: {', '.join(self.choices)}")


class Reference(Field):
    """ObjectId reference to another collection.

    Required references still accept the empty placeholder (None) so a record
    can be stored before the referenced document exists.
    """

    def __init__(self, collection_key: str, required: bool = True):
        super().__init__(ObjectId, required=required, default=None)
        self.collection_key = collection_key


def _is_empty(value: Any) -> bool:
    return value is MISSING or value is None or value == ""


def apply_schema(data: Dict, fields: Dict[str, Field]) -> Dict:
    """
    Validate and normalize `data` against `fields`.

    Unknown keys are dropped. Defaults fill absent values. All field errors
    are collected and raised together as one ValidationError.
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be an object")

    document = {}
    errors = []

    for name, field in fields.items():
        value = data.get(name, MISSING)

        # defaults satisfy `required`, including the None placeholder of references
        if _is_empty(value) and field.has_default():
            document[name] = copy.copy(field.default)
            continue

        if _is_empty(value):
            if field.required:
                errors.append(f"{name} is required")
            continue

        try:
            value = field.cast(name, value)
            if field.trim and field.required and value == "":
                raise ValueError(f"{name} is required")
            field.check(name, value)
        except ValueError as e:
            errors.append(str(e))
            continue

        document[name] = value

    if errors:
        raise ValidationError("Validation failed: " + "; ".join(errors), errors)

    return document


def stamp_new(document: Dict) -> Dict:
    """Set creation and update instants on a new document"""
    now = now_utc()
    document["createdAt"] = now
    document["updatedAt"] = now
    return document


def project(document: Dict, allowed_fields) -> Dict:
    """Copy the allow-listed fields into a plain dict; 'id' maps to str(_id)"""
    transformed = {}
    for field in allowed_fields:
        if field == "id":
            _id = document.get("_id")
            transformed["id"] = str(_id) if _id is not None else None
        else:
            transformed[field] = document.get(field)
    return transformed
