"""
Input error classifications for invoice and catalog documents.
"""

from typing import Optional, Dict, Any


class InputError(Exception):
    """Base class for problems with externally supplied documents."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MalformedInputError(InputError):
    """Document exists but is not in the expected shape."""

    def __init__(self, message: str, field: Optional[str] = None,
                 raw_data: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_data = raw_data
