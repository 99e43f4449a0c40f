"""Per-performance pricing and volume credit rules"""

from typing import Optional

from ..config.defaults import PricingConfig, get_default_config
from ..data.models import Performance, Play, PlayType
from ..errors import UnknownPlayTypeError


def resolve_play_type(play: Play) -> PlayType:
    """
    Map a play's type tag onto a priceable PlayType.

    Raises:
        UnknownPlayTypeError: If no pricing rule exists for the tag
    """
    try:
        return PlayType(play.type)
    except ValueError:
        raise UnknownPlayTypeError(play.type, play_name=play.name) from None


class PricingEngine:
    """
    Stateless pricing engine.

    All amounts are integer cents; nothing is rounded here.
    """

    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config or get_default_config()

    def price(self, performance: Performance, play: Play) -> int:
        """
        Price a single performance.

        Args:
            performance: Performance being billed
            play: Catalog entry the performance refers to

        Returns:
            Amount in cents

        Raises:
            UnknownPlayTypeError: If the play type has no pricing rule
        """
        play_type = resolve_play_type(play)
        audience = performance.audience

        if play_type is PlayType.TRAGEDY:
            return self._tragedy_amount(audience)
        if play_type is PlayType.COMEDY:
            return self._comedy_amount(audience)
        raise UnknownPlayTypeError(play.type, play_name=play.name)

    def volume_credits(self, performance: Performance, play: Play) -> int:
        """Volume credits earned by a single performance."""
        params = self.config.credits
        audience = performance.audience

        result = max(audience - params.threshold, 0)
        if play.type == PlayType.COMEDY.value:
            result += audience // params.comedy_divisor
        return result

    def _tragedy_amount(self, audience: int) -> int:
        params = self.config.tragedy
        result = params.base
        if audience > params.threshold:
            result += params.over_rate * (audience - params.threshold)
        return result

    def _comedy_amount(self, audience: int) -> int:
        params = self.config.comedy
        result = params.base
        if audience > params.threshold:
            result += params.over_flat + params.over_rate * (audience - params.threshold)
        result += params.per_head * audience
        return result
