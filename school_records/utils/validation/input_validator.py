"""Centralized Input Validation - request parsing for the API layer"""
from typing import Dict
from flask import request
from school_records.exceptions.exceptions import ValidationError
from school_records.models.schema import Field
from .validation_utils import ValidationUtils

def get_json_data() -> Dict:
    """Centralized JSON parsing"""
    return request.get_json(silent=True) or {}

def get_optional_query_params(**param_defaults) -> Dict:
    """Get optional query parameters with defaults"""
    return {param: request.args.get(param, default) for param, default in param_defaults.items()}

def _parse_filter_value(name: str, raw: str, field: Field):
    if field.type is bool:
        return ValidationUtils.parse_bool(raw)
    if field.type in (int, float):
        try:
            return field.type(raw)
        except ValueError:
            raise ValidationError(f"Invalid value for {name}: {raw}", [f"{name} must be a number"])
    # strings stay as-is; date filters are parsed by the query builder
    return raw

def get_filter_params(filter_fields, fields: Dict[str, Field]) -> Dict:
    """Typed equality filters from the query string; absent or empty ones are skipped"""
    filters = {}
    for name in filter_fields:
        raw = request.args.get(name)
        if raw is None or raw == "":
            continue
        filters[name] = _parse_filter_value(name, raw, fields[name])
    return filters
