"""Parent / guardian model - referenced by students as mother or father"""
from typing import Dict
from school_records.models.schema import Field, project
from school_records.models.registration import EMAIL_PATTERN

RELATIONS = ("mother", "father", "guardian")

PARENT_FIELDS: Dict[str, Field] = {
    "name": Field(str, required=True, trim=True),
    "relation": Field(str, required=True, choices=RELATIONS),
    "phone": Field(str, required=True),
    "email": Field(str, match=EMAIL_PATTERN, trim=True, lowercase=True),
    "occupation": Field(str, default=""),
    "religion": Field(str, default=""),
    "citizenship": Field(str, default=""),
    "education": Field(str, default=""),
    "address": Field(str, default=""),
}

PARENT_FILTERS = ("relation", "occupation", "religion", "citizenship")

PARENT_TRANSFORM_FIELDS = ("id",) + tuple(PARENT_FIELDS) + ("createdAt",)

NOT_FOUND_MESSAGE = "Parent does not exist"

def transform(document: Dict) -> Dict:
    return project(document, PARENT_TRANSFORM_FIELDS)
