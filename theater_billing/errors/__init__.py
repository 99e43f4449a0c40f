"""
Error classification for statement generation.

Statement errors are data-integrity failures: they abort the whole
statement and are never retried. Input errors are raised at the JSON
boundary, configuration errors when pricing parameters fail validation.
"""

from .statement import (
    StatementError,
    UnresolvedPlayIDError,
    UnknownPlayTypeError,
)
from .input import (
    InputError,
    MalformedInputError,
)
from .configuration import ConfigurationError

__all__ = [
    # Statement Errors
    "StatementError",
    "UnresolvedPlayIDError",
    "UnknownPlayTypeError",
    # Input Errors
    "InputError",
    "MalformedInputError",
    # Configuration
    "ConfigurationError",
]
