"""Pricing configuration: defaults, YAML overrides and validation."""

from .defaults import PricingConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "PricingConfig",
    "ValidationError",
    "get_default_config",
]
