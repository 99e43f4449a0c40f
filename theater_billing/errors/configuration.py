"""Raised when pricing configuration fails validation."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config.validation import ValidationError


class ConfigurationError(Exception):
    """Pricing configuration is unusable."""

    def __init__(self, errors: list["ValidationError"]):
        details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
        super().__init__(f"invalid pricing configuration: {details}")
        self.errors = errors
        self.recoverable = False
