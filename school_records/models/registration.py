"""Registration form model - enrollment requests submitted by families"""
from typing import Dict
from school_records.models.schema import Field, project

EMAIL_PATTERN = r'^\S+@\S+\.\S+$'

REGISTRATION_FIELDS: Dict[str, Field] = {
    "name": Field(str, max_length=128, trim=True),
    "email": Field(str, required=True, match=EMAIL_PATTERN, trim=True, lowercase=True),
    "phone": Field(str, required=True),
    "address": Field(str, required=True),
    "numChildrens": Field(int, required=True),
    "ageChildrens": Field(str, required=True),
    "grade": Field(str, required=True),
    "reason": Field(str, required=True),
}

# Equality filters accepted by list_download
REGISTRATION_FILTERS = ("grade", "numChildrens")

REGISTRATION_TRANSFORM_FIELDS = (
    "id", "name", "email", "phone", "address", "numChildrens", "ageChildrens",
    "grade", "reason", "createdAt",
)

NOT_FOUND_MESSAGE = "Registration Form does not exist"

def transform(document: Dict) -> Dict:
    return project(document, REGISTRATION_TRANSFORM_FIELDS)
