"""Centralized error handling and responses - DRY principle"""
import logging
from typing import Tuple
from school_records.exceptions.exceptions import SchoolRecordsError, ValidationError

logger = logging.getLogger(__name__)


# ============= ERROR HANDLERS =============

def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for services"""

    if isinstance(e, ValidationError):
        body = {"success": False, "message": e.message}
        if e.errors:
            body["errors"] = e.errors
        return body, e.status

    elif isinstance(e, SchoolRecordsError):
        return {"success": False, "message": e.message}, e.status

    elif isinstance(e, ValueError):
        return {"success": False, "message": str(e)}, 400

    else:
        sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
        logger.error(f"Unexpected error: {sanitized_error}")
        return {"success": False, "message": "Server error"}, 500
