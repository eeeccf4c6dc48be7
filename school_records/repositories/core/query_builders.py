"""Shared query builders - date range and equality filters (DRY)"""
from typing import Any, Dict, Iterable
from school_records.utils.time.timeutils import parse_datetime

CREATED_AT = "createdAt"

def is_given(value: Any) -> bool:
    """A filter value counts as given unless it is None or an empty string"""
    return value is not None and value != ""

def build_date_range_filter(start=None, end=None, field: str = CREATED_AT) -> Dict:
    """Inclusive range on `field`; one-sided when only one bound is given"""
    bounds = {}
    if is_given(start):
        bounds["$gte"] = parse_datetime(start)
    if is_given(end):
        bounds["$lte"] = parse_datetime(end)
    return {field: bounds} if bounds else {}

def build_equality_filter(filters: Dict, allowed: Iterable[str], date_fields: Iterable[str] = ()) -> Dict:
    """Keep only allowed, given filters; date fields are parsed to datetimes"""
    date_fields = set(date_fields)
    query = {}
    for field in allowed:
        value = filters.get(field)
        if not is_given(value):
            continue
        query[field] = parse_datetime(value) if field in date_fields else value
    return query

def build_download_query(start=None, end=None, filters: Dict = None,
                         allowed: Iterable[str] = (), date_fields: Iterable[str] = ()) -> Dict:
    """Date range ANDed with equality filters"""
    query = build_equality_filter(filters or {}, allowed, date_fields)
    query.update(build_date_range_filter(start, end))
    return query
