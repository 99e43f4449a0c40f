"""
Fatal errors raised while pricing or aggregating an invoice.

Any of these aborts statement generation; no partial statement is produced.
"""

from typing import Optional, Dict, Any


class StatementError(Exception):
    """Base class for unrecoverable statement generation failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UnresolvedPlayIDError(StatementError):
    """A performance references a play that is missing from the catalog."""

    def __init__(self, play_id: str, **kwargs):
        super().__init__(f"unknown play: {play_id}", **kwargs)
        self.play_id = play_id


class UnknownPlayTypeError(StatementError):
    """A play carries a type tag with no pricing rule."""

    def __init__(self, play_type: str, play_name: Optional[str] = None, **kwargs):
        super().__init__(f"unknown type: {play_type}", **kwargs)
        self.play_type = play_type
        self.play_name = play_name
