#!/usr/bin/env python3
"""
Basic Usage Example - Theater Billing Statement Engine

This script demonstrates:
- Building a catalog and an invoice in code
- Rendering a statement with the default pricing
- Overriding pricing parameters for a single engine
- Handling an unknown play type

Run: python examples/basic_usage.py
"""

from theater_billing.data.models import Invoice, Performance, Play
from theater_billing.engine import StatementEngine
from theater_billing.errors import UnknownPlayTypeError
from theater_billing.logging import configure_logging


def create_sample_catalog() -> dict[str, Play]:
    """Create the sample play catalog."""
    return {
        "hamlet": Play(name="Hamlet", type="tragedy"),
        "as-like": Play(name="As You Like It", type="comedy"),
        "othello": Play(name="Othello", type="tragedy"),
    }


def create_sample_invoice() -> Invoice:
    """Create the sample invoice."""
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )


def main():
    configure_logging(level="INFO")
    catalog = create_sample_catalog()
    invoice = create_sample_invoice()

    print("=== Default pricing ===")
    engine = StatementEngine()
    print(engine.statement(invoice, catalog))

    print("=== Discounted tragedies ===")
    discounted = StatementEngine(overrides={"tragedy": {"base": 30000}})
    print(discounted.statement(invoice, catalog))

    print("=== Unknown play type ===")
    catalog["pastoral"] = Play(name="The Winter's Tale", type="pastoral")
    bad_invoice = Invoice(customer="SmallCo", performances=(Performance("pastoral", 10),))
    try:
        engine.statement(bad_invoice, catalog)
    except UnknownPlayTypeError as e:
        print(f"Statement rejected: {e}")


if __name__ == "__main__":
    main()
