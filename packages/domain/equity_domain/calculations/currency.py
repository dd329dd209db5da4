"""Currency conversion for investment amounts.

Investment multipliers compare contributions across participants, so every
amount is first converted to a common currency (USD). The rate lookup is a
small protocol so a live rate source can replace the fixed table without
touching the multiplier formula.
"""

import logging
from typing import Dict, Protocol
from pydantic import Field

from ..schemas.base import DomainModel

logger = logging.getLogger(__name__)

# Pesos per US dollar used by the default table
PHP_PER_USD = 56.0


class RateLookup(Protocol):
    """Anything that can convert an amount to USD."""

    def to_usd(self, amount: float, currency: str) -> float:
        ...


class FixedRateTable(DomainModel):
    """Constant conversion rates to USD.

    Unknown currencies convert at 1.0 (logged), never raise.

    Example:
        rates = FixedRateTable()
        rates.to_usd(5600, "PHP")  # 100.0
    """

    usd_per_unit: Dict[str, float] = Field(
        default_factory=lambda: {"USD": 1.0, "PHP": 1.0 / PHP_PER_USD},
        description="USD value of one unit of each currency"
    )

    def to_usd(self, amount: float, currency: str) -> float:
        rate = self.usd_per_unit.get(currency)
        if rate is None:
            logger.warning("No USD rate for currency %r; converting at 1.0", currency)
            return amount
        return amount * rate


DEFAULT_RATES = FixedRateTable()
