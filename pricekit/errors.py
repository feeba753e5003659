"""Exceptions raised by currency conversion and pricing calculations."""

from __future__ import annotations


class CurrencyConverterError(Exception):
    """Base class for failures while converting between currencies."""


class RateNotFoundError(CurrencyConverterError, LookupError):
    """No exchange rate is known for a currency."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Exchange rate not found for currency: {code}")


class DivisionByZeroError(CurrencyConverterError, ZeroDivisionError):
    """A zero exchange rate was used as a divisor."""

    def __init__(self) -> None:
        super().__init__("Division by zero occurred during conversion.")


class PricingError(Exception):
    """Base class for failures while calculating a price."""


class RateCalculationFailedError(PricingError):
    """Looking up or converting with exchange rates failed while pricing."""

    def __init__(self, cause: CurrencyConverterError) -> None:
        self.cause = cause
        super().__init__(f"Currency rate calculation failed: {cause}")


class InvalidMarkupCalculationError(PricingError):
    """The markup parameters lead to an undefined price."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid markup calculation: {detail}")


class AdjustmentFailedError(PricingError):
    """A price adjustment could not be applied."""

    def __init__(self, cause: CurrencyConverterError) -> None:
        self.cause = cause
        super().__init__(f"Price adjustment failed: {cause}")