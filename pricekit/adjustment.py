"""Price adjustments such as tax, discount and fixed fees."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Union

from .currency import Currency, _decimal


class AdjustmentKind(Enum):
    """The category of an applied adjustment."""

    TAX = "tax"
    DISCOUNT = "discount"
    FIXED = "fixed"


@dataclass(frozen=True)
class Tax:
    """A tax added as a percentage of the current sell price."""

    name: str
    percentage: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", _decimal(self.percentage))


@dataclass(frozen=True)
class Discount:
    """A discount taken as a percentage of the current sell price."""

    name: str
    percentage: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", _decimal(self.percentage))


@dataclass(frozen=True)
class Fixed:
    """A fixed fee in a given currency, converted to the sell currency."""

    name: str
    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _decimal(self.amount))


PriceAdjustment = Union[Tax, Discount, Fixed]


def _optional_decimal(value: Any) -> Optional[Decimal]:
    return None if value is None else _decimal(value)


@dataclass(frozen=True, kw_only=True)
class AppliedAdjustment:
    """An adjustment after calculation, expressed in the sell currency."""

    kind: AdjustmentKind
    name: str
    percentage: Optional[Decimal] = None
    original_currency: Optional[Currency] = None
    original_amount: Optional[Decimal] = None
    applied_amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", AdjustmentKind(self.kind))
        object.__setattr__(self, "percentage", _optional_decimal(self.percentage))
        object.__setattr__(self, "original_amount", _optional_decimal(self.original_amount))
        object.__setattr__(self, "applied_amount", _decimal(self.applied_amount))

    def to_dict(self) -> dict[str, Any]:
        """Serialize, leaving out fields that are not set."""
        data: dict[str, Any] = {"kind": self.kind.value, "name": self.name}
        if self.percentage is not None:
            data["percentage"] = str(self.percentage)
        if self.original_currency is not None:
            data["original_currency"] = self.original_currency.to_dict()
        if self.original_amount is not None:
            data["original_amount"] = str(self.original_amount)
        data["applied_amount"] = str(self.applied_amount)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppliedAdjustment:
        try:
            currency = data.get("original_currency")
            return cls(
                kind=AdjustmentKind(data["kind"]),
                name=str(data["name"]),
                percentage=data.get("percentage"),
                original_currency=None if currency is None else Currency.from_dict(currency),
                original_amount=data.get("original_amount"),
                applied_amount=data["applied_amount"],
            )
        except KeyError as exc:
            raise ValueError(f"applied adjustment is missing field {exc.args[0]!r}") from exc


def adjustment_to_dict(adjustment: PriceAdjustment) -> dict[str, Any]:
    """Serialize an adjustment into a tagged dictionary."""
    if isinstance(adjustment, Tax):
        return {
            "price_adjustment": "tax",
            "name": adjustment.name,
            "percentage": str(adjustment.percentage),
        }
    if isinstance(adjustment, Discount):
        return {
            "price_adjustment": "discount",
            "name": adjustment.name,
            "percentage": str(adjustment.percentage),
        }
    if isinstance(adjustment, Fixed):
        return {
            "price_adjustment": "fixed",
            "name": adjustment.name,
            "amount": str(adjustment.amount),
            "currency": adjustment.currency.to_dict(),
        }
    raise TypeError(f"not a price adjustment: {adjustment!r}")


def adjustment_from_dict(data: Mapping[str, Any]) -> PriceAdjustment:
    """Build an adjustment from a dictionary made by adjustment_to_dict."""
    kind = data.get("price_adjustment")
    try:
        if kind == "tax":
            return Tax(name=str(data["name"]), percentage=data["percentage"])
        if kind == "discount":
            return Discount(name=str(data["name"]), percentage=data["percentage"])
        if kind == "fixed":
            return Fixed(
                name=str(data["name"]),
                amount=data["amount"],
                currency=Currency.from_dict(data["currency"]),
            )
    except KeyError as exc:
        raise ValueError(f"adjustment is missing field {exc.args[0]!r}") from exc
    raise ValueError(f"unknown price adjustment: {kind!r}")