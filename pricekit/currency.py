"""Currencies and conversion between them through exchange rates."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from .errors import DivisionByZeroError, RateNotFoundError


def _decimal(value: Any) -> Decimal:
    """Coerce a number or numeric string to Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"not a decimal amount: {value!r}") from exc


@dataclass(frozen=True)
class Currency:
    """A monetary unit identified by its ISO 4217 code."""

    code: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Currency:
        try:
            return cls(code=str(data["code"]), name=str(data["name"]))
        except KeyError as exc:
            raise ValueError(f"currency is missing field {exc.args[0]!r}") from exc


class CurrencyConverter:
    """Holds exchange rates against a common base and converts amounts.

    Conversion is linear: ``amount / rate_from * rate_to``.
    """

    def __init__(self) -> None:
        self._rates: dict[str, Decimal] = {}

    def add_exchange_rate(self, currency: Currency, rate: Any) -> None:
        """Set the rate of ``currency`` relative to the common base."""
        self._rates[currency.code] = _decimal(rate)

    def get_exchange_rate(self, currency: Currency) -> Decimal | None:
        """Return the stored rate for ``currency``, or None if unknown."""
        return self._rates.get(currency.code)

    def convert(self, amount: Any, source: Currency, target: Currency) -> Decimal:
        """Convert ``amount`` from ``source`` to ``target``.

        Raises RateNotFoundError for a missing rate and DivisionByZeroError
        when the source rate is zero.
        """
        amount = _decimal(amount)
        if source.code == target.code:
            return amount
        source_rate = self._rate_for(source)
        target_rate = self._rate_for(target)
        if source_rate.is_zero():
            raise DivisionByZeroError()
        return (amount / source_rate) * target_rate

    def _rate_for(self, currency: Currency) -> Decimal:
        try:
            return self._rates[currency.code]
        except KeyError:
            raise RateNotFoundError(currency.code) from None

    def to_dict(self) -> dict[str, Any]:
        return {"exchange_rates": {code: str(rate) for code, rate in self._rates.items()}}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CurrencyConverter:
        try:
            rates = data["exchange_rates"]
        except KeyError:
            raise ValueError("converter is missing field 'exchange_rates'") from None
        converter = cls()
        converter._rates = {str(code): _decimal(rate) for code, rate in rates.items()}
        return converter

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencyConverter):
            return NotImplemented
        return self._rates == other._rates

    def __repr__(self) -> str:
        return f"CurrencyConverter({self._rates!r})"