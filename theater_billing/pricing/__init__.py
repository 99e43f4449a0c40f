"""Pricing and volume credit calculation for theater performances"""

from .aggregator import StatementAggregator
from .engine import PricingEngine, resolve_play_type

__all__ = [
    "PricingEngine",
    "StatementAggregator",
    "resolve_play_type",
]
