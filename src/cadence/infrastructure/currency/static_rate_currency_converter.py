"""Currency converter backed by a fixed rate table."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Mapping, Optional

from cadence.domain.shared.exceptions import ValidationError

CENT = Decimal("0.01")


class StaticRateCurrencyConverter:
    """
    Convert through a base currency using fixed rates.

    ``rates`` maps a currency code to how many units of it one unit of the
    base currency buys (base -> 1).
    """

    def __init__(
        self,
        rates: Optional[Mapping[str, Decimal]] = None,
        base_currency: str = "EUR",
    ):
        self._base = base_currency.upper()
        self._rates: Dict[str, Decimal] = {
            code.upper(): Decimal(str(rate)) for code, rate in (rates or {}).items()
        }
        self._rates[self._base] = Decimal(1)

    @property
    def base_currency(self) -> str:
        return self._base

    def convert(
        self,
        amount: Decimal,
        from_currency: str,
        to_currency: str,
    ) -> Decimal:
        source = from_currency.upper()
        target = to_currency.upper()
        if source == target:
            return amount

        for code in (source, target):
            if code not in self._rates:
                msg = f"No exchange rate for {code}"
                raise ValidationError(msg, details={"currency": code})

        in_base = amount / self._rates[source]
        return (in_base * self._rates[target]).quantize(CENT, rounding=ROUND_HALF_UP)
