"""Payment type model - a named fee with a payment deadline"""
from datetime import datetime
from typing import Dict
from school_records.models.schema import Field, project

PAYMENT_TYPE_FIELDS: Dict[str, Field] = {
    "type": Field(str, required=True),
    "deadline": Field(datetime, required=True),
}

PAYMENT_TYPE_FILTERS = ("type", "deadline")

PAYMENT_TYPE_TRANSFORM_FIELDS = ("id", "type", "deadline", "createdAt")

NOT_FOUND_MESSAGE = "The payment type does not exist"

def transform(document: Dict) -> Dict:
    return project(document, PAYMENT_TYPE_TRANSFORM_FIELDS)
