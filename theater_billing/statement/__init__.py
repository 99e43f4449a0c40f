"""Plain-text statement rendering"""

from .formatter import StatementFormatter, format_currency

__all__ = ["StatementFormatter", "format_currency"]
