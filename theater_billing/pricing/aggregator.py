"""Invoice-wide totals"""

from ..data.models import Catalog, Invoice, Performance, Play
from ..errors import UnresolvedPlayIDError
from .engine import PricingEngine


class StatementAggregator:
    """Sums per-performance prices and credits over an invoice.

    Errors from play resolution or pricing propagate unchanged.
    """

    def __init__(self, engine: PricingEngine, catalog: Catalog):
        self.engine = engine
        self.catalog = catalog

    def resolve(self, performance: Performance) -> Play:
        """Look up the play a performance refers to."""
        play = self.catalog.get(performance.play_id)
        if play is None:
            raise UnresolvedPlayIDError(performance.play_id)
        return play

    def amount_for(self, performance: Performance) -> int:
        return self.engine.price(performance, self.resolve(performance))

    def credits_for(self, performance: Performance) -> int:
        play = self.resolve(performance)
        # Price first so an unknown type fails before credits are computed
        self.engine.price(performance, play)
        return self.engine.volume_credits(performance, play)

    def total_amount(self, invoice: Invoice) -> int:
        """Total amount owed, in cents."""
        return sum(self.amount_for(p) for p in invoice.performances)

    def total_credits(self, invoice: Invoice) -> int:
        """Total volume credits earned."""
        return sum(self.credits_for(p) for p in invoice.performances)
