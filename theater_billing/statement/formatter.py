"""Statement text rendering.

Formatting is presentation only: amounts come in as integer cents and are
never parsed back out of the rendered text.
"""

from typing import Optional

from ..config.defaults import CurrencyParams
from ..data.models import Catalog, Invoice
from ..pricing.aggregator import StatementAggregator
from ..pricing.engine import PricingEngine


def format_currency(amount: int, currency: Optional[CurrencyParams] = None) -> str:
    """
    Render an amount of minor units as a currency string.

    >>> format_currency(173000)
    '$1,730.00'
    """
    currency = currency or CurrencyParams()
    sign = "-" if amount < 0 else ""
    major, minor = divmod(abs(amount), currency.minor_units)
    # Exactly two decimals regardless of minor_units
    cents = minor * 100 // currency.minor_units
    return f"{sign}{currency.symbol}{major:,}.{cents:02d}"


class StatementFormatter:
    """Renders an invoice into statement text."""

    def __init__(self, engine: Optional[PricingEngine] = None):
        self.engine = engine or PricingEngine()

    def usd(self, amount: int) -> str:
        return format_currency(amount, self.engine.config.currency)

    def render(self, invoice: Invoice, catalog: Catalog) -> str:
        """
        Build the statement for an invoice.

        Lines appear in invoice order. Any pricing or lookup error aborts
        rendering; no partial text is returned.

        Raises:
            UnresolvedPlayIDError: If a performance references an unknown play
            UnknownPlayTypeError: If a play type has no pricing rule
        """
        aggregator = StatementAggregator(self.engine, catalog)

        lines = [f"Statement for {invoice.customer}"]
        for performance in invoice.performances:
            play = aggregator.resolve(performance)
            lines.append(
                f"  {play.name}: {self.usd(aggregator.amount_for(performance))} "
                f"({performance.audience} seats)"
            )

        total_amount = aggregator.total_amount(invoice)
        total_credits = aggregator.total_credits(invoice)

        lines.append(f"Amount owed is {self.usd(total_amount)}")
        lines.append(f"You earned {total_credits} credits")
        return "\n".join(lines) + "\n"
