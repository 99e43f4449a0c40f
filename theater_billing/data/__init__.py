"""Domain values and JSON input parsing"""

from .models import Catalog, Invoice, Performance, Play, PlayType
from .parsers import parse_invoices, parse_plays

__all__ = [
    "Catalog",
    "Invoice",
    "Performance",
    "Play",
    "PlayType",
    "parse_invoices",
    "parse_plays",
]
