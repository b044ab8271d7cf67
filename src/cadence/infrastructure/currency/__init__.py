from cadence.infrastructure.currency.static_rate_currency_converter import (
    StaticRateCurrencyConverter,
)

__all__ = ["StaticRateCurrencyConverter"]
