"""
Immutable domain values for statement generation.

Plays and invoices are read-only snapshots supplied by the caller; nothing
in the billing core mutates them.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class PlayType(Enum):
    """Play types with a pricing rule."""
    TRAGEDY = "tragedy"
    COMEDY = "comedy"


@dataclass(frozen=True)
class Play:
    """Catalog entry for a play."""
    name: str
    type: str          # Open set; only PlayType values are priceable


@dataclass(frozen=True)
class Performance:
    """A single performance on an invoice."""
    play_id: str       # Key into the catalog
    audience: int      # Seats sold, never negative


@dataclass(frozen=True)
class Invoice:
    """Customer invoice; performance order is statement line order."""
    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self):
        # Accept any sequence but store a tuple
        object.__setattr__(self, "performances", tuple(self.performances))


Catalog = Mapping[str, Play]
