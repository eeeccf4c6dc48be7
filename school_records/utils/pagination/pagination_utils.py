"""Pagination Utilities - DRY Implementation for Consistent Pagination (SoC)"""
from typing import Any, Tuple
from school_records.config.settings import PaginationConfig
from school_records.utils.validation.validation_utils import ValidationUtils

def normalize_pagination(page: Any = None, per_page: Any = None) -> Tuple[int, int]:
    """
    Extract and validate pagination parameters.

    Args:
        page: 1-based page number (int or query-string value)
        per_page: Page size (int or query-string value)

    Returns:
        Tuple of (page, per_page) as integers, page >= 1 and
        1 <= per_page <= MAX_PER_PAGE
    """
    page = ValidationUtils.safe_int_conversion(page, PaginationConfig.DEFAULT_PAGE)
    per_page = ValidationUtils.safe_int_conversion(per_page, PaginationConfig.DEFAULT_PER_PAGE)

    page = max(1, page)
    per_page = max(1, min(per_page, PaginationConfig.MAX_PER_PAGE))

    return page, per_page
