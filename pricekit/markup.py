"""Markup strategies added on top of a buy price."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Union

from .currency import Currency, _decimal


@dataclass(frozen=True)
class AmountMarkup:
    """A fixed markup in a given currency, converted to the buy currency."""

    value: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _decimal(self.value))


@dataclass(frozen=True)
class PercentageMarkup:
    """A markup as a percentage of the buy price."""

    percentage: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", _decimal(self.percentage))


@dataclass(frozen=True)
class CommissionMarkup:
    """A commission taken as a percentage of the final price."""

    percentage: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", _decimal(self.percentage))


Markup = Union[AmountMarkup, PercentageMarkup, CommissionMarkup]


def markup_to_dict(markup: Markup) -> dict[str, Any]:
    """Serialize a markup into a tagged dictionary."""
    if isinstance(markup, AmountMarkup):
        return {
            "markup_type": "amount",
            "value": str(markup.value),
            "currency": markup.currency.to_dict(),
        }
    if isinstance(markup, PercentageMarkup):
        return {"markup_type": "percentage", "percentage": str(markup.percentage)}
    if isinstance(markup, CommissionMarkup):
        return {"markup_type": "commission", "percentage": str(markup.percentage)}
    raise TypeError(f"not a markup: {markup!r}")


def markup_from_dict(data: Mapping[str, Any]) -> Markup:
    """Build a markup from a dictionary made by markup_to_dict."""
    kind = data.get("markup_type")
    try:
        if kind == "amount":
            return AmountMarkup(
                value=data["value"], currency=Currency.from_dict(data["currency"])
            )
        if kind == "percentage":
            return PercentageMarkup(data["percentage"])
        if kind == "commission":
            return CommissionMarkup(data["percentage"])
    except KeyError as exc:
        raise ValueError(f"markup is missing field {exc.args[0]!r}") from exc
    raise ValueError(f"unknown markup type: {kind!r}")