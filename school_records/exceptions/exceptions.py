"""Custom exceptions - SoC principle"""

class SchoolRecordsError(Exception):
    """Base exception carrying a message and an HTTP-style status code"""
    status = 500

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

class NotFoundError(SchoolRecordsError):
    """Record not found (or malformed identifier)"""
    status = 404

class ValidationError(SchoolRecordsError):
    """Input or schema validation error"""
    status = 400

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])
