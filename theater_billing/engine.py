"""
Statement generation coordinator.

Builds the pricing configuration, wires the pricing engine into the
statement formatter and records each statement that is produced.
"""

from pathlib import Path
from typing import Any, Optional, Union

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import Catalog, Invoice
from .data.parsers import parse_invoices, parse_plays
from .errors import ConfigurationError, StatementError
from .logging.config import get_billing_logger
from .pricing.aggregator import StatementAggregator
from .pricing.engine import PricingEngine
from .statement.formatter import StatementFormatter


class StatementEngine:
    """
    Main entry point for producing invoice statements.

    Pipeline: Invoice + Catalog -> Pricing -> Aggregation -> Statement text
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> None:
        """Initialize the engine, failing fast on invalid configuration."""
        self.logger = get_billing_logger(__name__)
        self.config_loader = ConfigLoader.create(config_dir)

        merged = self.config_loader.merge_config(overrides)
        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            self.logger.error(
                "Pricing configuration validation failed",
                errors=[f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            )
            raise ConfigurationError(validation_errors)

        self.config = self.config_loader.build_config(merged)
        self.pricing_engine = PricingEngine(self.config)
        self.formatter = StatementFormatter(self.pricing_engine)

        self.logger.debug("Statement engine initialized", config_dir=str(self.config_loader.config_dir))

    def statement(self, invoice: Invoice, catalog: Catalog) -> str:
        """Render the statement for one invoice."""
        log = self.logger.bind(
            customer=invoice.customer,
            performance_count=len(invoice.performances)
        )

        try:
            text = self.formatter.render(invoice, catalog)
        except StatementError as e:
            log.error("Statement generation failed", error=str(e), **e.context)
            raise

        aggregator = StatementAggregator(self.pricing_engine, catalog)
        log.info(
            "Statement rendered",
            total_amount=aggregator.total_amount(invoice),
            total_credits=aggregator.total_credits(invoice)
        )
        return text

    def statements_from_json(
        self,
        invoices_json: Union[str, bytes],
        plays_json: Union[str, bytes],
    ) -> list[str]:
        """Render every invoice in an invoices document against a plays document."""
        catalog = parse_plays(plays_json)
        invoices = parse_invoices(invoices_json)

        self.logger.debug("Parsed input documents", plays=len(catalog), invoices=len(invoices))

        return [self.statement(invoice, catalog) for invoice in invoices]
