"""Pytest configuration and shared fixtures."""

import pytest

from theater_billing.data.models import Invoice, Performance, Play
from theater_billing.pricing.engine import PricingEngine


@pytest.fixture
def sample_plays() -> dict[str, Play]:
    """Classic three-play catalog."""
    return {
        "hamlet": Play(name="Hamlet", type="tragedy"),
        "as-like": Play(name="As You Like It", type="comedy"),
        "othello": Play(name="Othello", type="tragedy"),
    }


@pytest.fixture
def sample_invoice() -> Invoice:
    """Classic BigCo invoice over the three sample plays."""
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )


@pytest.fixture
def pricing_engine() -> PricingEngine:
    """Pricing engine with default parameters."""
    return PricingEngine()


@pytest.fixture
def plays_json() -> str:
    return """{
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "as-like": {"name": "As You Like It", "type": "comedy"},
        "othello": {"name": "Othello", "type": "tragedy"}
    }"""


@pytest.fixture
def invoices_json() -> str:
    return """[{
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
            {"playID": "othello", "audience": 40}
        ]
    }]"""
