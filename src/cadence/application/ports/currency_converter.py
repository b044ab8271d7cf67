"""Currency converter port."""

from decimal import Decimal
from typing import Protocol


class CurrencyConverter(Protocol):
    """Pure conversion between ISO currency codes."""

    def convert(
        self,
        amount: Decimal,
        from_currency: str,
        to_currency: str,
    ) -> Decimal:
        """Convert ``amount`` from one currency to another.

        Raises
        ------
        ValidationError
            If no rate is known for the pair
        """
        ...
