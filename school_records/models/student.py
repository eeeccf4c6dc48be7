"""
Student model.

gender = {
    female: True,
    male: False,
}
"""
from datetime import datetime
from typing import Dict
from school_records.models.schema import Field, Reference, project
from school_records.models import parent

STUDENT_FIELDS: Dict[str, Field] = {
    "grade": Field(str, required=True),
    "firstName": Field(str, required=True),
    "lastName": Field(str, required=True),
    "birthplace": Field(str, required=True),
    "birthdate": Field(datetime, required=True),
    "gender": Field(bool, required=True),
    "religion": Field(str, required=True),
    "citizenship": Field(str, required=True),
    "picture": Field(str, default=""),
    "address": Field(str, required=True),
    "nickname": Field(str, required=True),
    "birthOrder": Field(int, required=True),
    "numOfSiblings": Field(int, required=True),
    "statusInFamily": Field(str, required=True),
    "studentStatus": Field(bool, default=True),
    "height": Field(float, required=True, default=0),
    "weight": Field(float, required=True, default=0),
    "bloodType": Field(str, required=True, max_length=2),
    "diseaseHistory": Field(str, default=""),
    "distanceToHome": Field(str, required=True),
    "language": Field(str, required=True),
    "mother_id": Reference("parent_collection"),
    "father_id": Reference("parent_collection"),
}

PARENT_REFERENCES = ("mother_id", "father_id")

STUDENT_FILTERS = (
    "grade", "birthplace", "birthdate", "gender", "religion",
    "citizenship", "bloodType", "studentStatus",
)

STUDENT_TRANSFORM_FIELDS = ("id",) + tuple(STUDENT_FIELDS) + ("createdAt", "updatedAt")

NOT_FOUND_MESSAGE = "Student does not exist"

def transform(document: Dict) -> Dict:
    transformed = project(document, STUDENT_TRANSFORM_FIELDS)
    # populated references are exposed through the parent allow-list
    for ref in PARENT_REFERENCES:
        if isinstance(transformed[ref], dict):
            transformed[ref] = parent.transform(transformed[ref])
    return transformed
