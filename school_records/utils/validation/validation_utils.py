"""Consolidated Validation Utilities - Single Source of Truth"""
from typing import Any, Optional
from school_records.exceptions.exceptions import ValidationError

class ValidationUtils:
    """Unified validation utilities"""

    @staticmethod
    def safe_int_conversion(value: Any, default: int) -> int:
        """Safe integer conversion"""
        try:
            return int(value)
        except (ValueError, TypeError, OverflowError):
            return default

    @staticmethod
    def parse_bool(value: Any) -> Optional[bool]:
        """Parse query-string booleans ('true'/'false'/'1'/'0'); None when absent"""
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in ("true", "1", "yes"):
            return True
        if text in ("false", "0", "no"):
            return False
        raise ValidationError(f"Invalid boolean value: {value}", [f"{value!r} is not a boolean"])
