"""Default pricing parameters for theater statements.

All monetary values are integer minor currency units (cents).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TragedyParams:
    """Tragedy pricing tier."""
    base: int = 40000                # Flat fee per performance
    threshold: int = 30              # Audience included in the base fee
    over_rate: int = 1000            # Per seat above threshold


@dataclass(frozen=True)
class ComedyParams:
    """Comedy pricing tier."""
    base: int = 30000                # Flat fee per performance
    threshold: int = 20              # Audience included in the base fee
    over_flat: int = 10000           # One-off surcharge once threshold is exceeded
    over_rate: int = 500             # Per seat above threshold
    per_head: int = 300              # Per seat, always charged


@dataclass(frozen=True)
class CreditParams:
    """Volume credit parameters."""
    threshold: int = 30              # Seats that earn no base credit
    comedy_divisor: int = 5          # One bonus credit per this many comedy seats


@dataclass(frozen=True)
class CurrencyParams:
    """Display currency parameters."""
    symbol: str = "$"
    minor_units: int = 100           # Minor units per major unit


@dataclass(frozen=True)
class PricingConfig:
    """Complete pricing configuration."""
    tragedy: TragedyParams
    comedy: ComedyParams
    credits: CreditParams
    currency: CurrencyParams


def get_default_config() -> PricingConfig:
    """Get the default configuration instance."""
    return PricingConfig(
        tragedy=TragedyParams(),
        comedy=ComedyParams(),
        credits=CreditParams(),
        currency=CurrencyParams(),
    )
