"""Full pricing of a product: markup, currency conversion and adjustments."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from .adjustment import (
    AdjustmentKind,
    AppliedAdjustment,
    Discount,
    Fixed,
    PriceAdjustment,
    Tax,
)
from .currency import Currency, CurrencyConverter, _decimal
from .errors import (
    AdjustmentFailedError,
    CurrencyConverterError,
    DivisionByZeroError,
    InvalidMarkupCalculationError,
    RateCalculationFailedError,
    RateNotFoundError,
)
from .markup import (
    AmountMarkup,
    CommissionMarkup,
    Markup,
    PercentageMarkup,
    markup_from_dict,
    markup_to_dict,
)

_HUNDRED = Decimal("100.0")


def _optional_decimal(value: Any) -> Optional[Decimal]:
    return None if value is None else _decimal(value)


def _optional_str(value: Optional[Decimal]) -> Optional[str]:
    return None if value is None else str(value)


@dataclass
class PricingDetail:
    """Buy and sell prices of a product with every intermediate value.

    Only the buy side is set on creation; call ``apply_markup`` and
    ``apply_adjustments`` (or ``calculate_final_price``) to fill in the rest.
    """

    buy_price: Decimal
    buy_currency: Currency
    sell_currency: Currency
    sell_price: Decimal = Decimal("0.0")
    markup: Optional[Markup] = None
    markup_value_in_buy_currency: Optional[Decimal] = None
    markup_value_in_sell_currency: Optional[Decimal] = None
    converted_buy_price: Optional[Decimal] = None
    buy_currency_rate: Optional[Decimal] = None
    sell_currency_rate: Optional[Decimal] = None
    exchange_rate: Optional[Decimal] = None
    applied_adjustments: list[AppliedAdjustment] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.buy_price = _decimal(self.buy_price)
        self.sell_price = _decimal(self.sell_price)

    def _rate(self, converter: CurrencyConverter, currency: Currency) -> Decimal:
        rate = converter.get_exchange_rate(currency)
        if rate is None:
            raise RateCalculationFailedError(RateNotFoundError(currency.code))
        return rate

    def _markup_in_buy_currency(self, converter: CurrencyConverter) -> Decimal:
        markup = self.markup
        if markup is None:
            return Decimal("0.0")
        if isinstance(markup, AmountMarkup):
            try:
                return converter.convert(markup.value, markup.currency, self.buy_currency)
            except CurrencyConverterError as exc:
                raise RateCalculationFailedError(exc) from exc
        if isinstance(markup, PercentageMarkup):
            return self.buy_price * (markup.percentage / _HUNDRED)
        if isinstance(markup, CommissionMarkup):
            pct = markup.percentage
            if pct >= _HUNDRED:
                raise InvalidMarkupCalculationError(
                    f"Commission percentage ({pct}) must be less than 100."
                )
            return self.buy_price * (pct / (_HUNDRED - pct))
        raise TypeError(f"not a markup: {markup!r}")

    def apply_markup(self, converter: CurrencyConverter) -> None:
        """Compute exchange rates and markup, and set the initial sell price."""
        buy_rate = self._rate(converter, self.buy_currency)
        sell_rate = self._rate(converter, self.sell_currency)
        if buy_rate.is_zero():
            raise RateCalculationFailedError(DivisionByZeroError())
        exchange_rate = sell_rate / buy_rate

        self.buy_currency_rate = buy_rate
        self.sell_currency_rate = sell_rate
        self.exchange_rate = exchange_rate

        markup_in_buy = self._markup_in_buy_currency(converter)
        self.markup_value_in_buy_currency = markup_in_buy
        sell_base = self.buy_price + markup_in_buy
        self.converted_buy_price = sell_base
        self.markup_value_in_sell_currency = markup_in_buy * exchange_rate
        self.sell_price = sell_base * exchange_rate

    def apply_adjustments(
        self, adjustments: Iterable[PriceAdjustment], converter: CurrencyConverter
    ) -> None:
        """Apply taxes, discounts and fixed fees in order to the sell price."""
        current = self.sell_price
        self.applied_adjustments.clear()

        for adj in adjustments:
            if isinstance(adj, Tax):
                amount = current * (adj.percentage / _HUNDRED)
                current += amount
                applied = AppliedAdjustment(
                    kind=AdjustmentKind.TAX,
                    name=adj.name,
                    percentage=adj.percentage,
                    original_currency=self.sell_currency,
                    applied_amount=amount,
                )
            elif isinstance(adj, Discount):
                amount = current * (adj.percentage / _HUNDRED)
                current -= amount
                applied = AppliedAdjustment(
                    kind=AdjustmentKind.DISCOUNT,
                    name=adj.name,
                    percentage=adj.percentage,
                    original_currency=self.sell_currency,
                    applied_amount=-amount,
                )
            elif isinstance(adj, Fixed):
                try:
                    converted = converter.convert(adj.amount, adj.currency, self.sell_currency)
                except CurrencyConverterError as exc:
                    raise AdjustmentFailedError(exc) from exc
                current += converted
                applied = AppliedAdjustment(
                    kind=AdjustmentKind.FIXED,
                    name=adj.name,
                    original_currency=adj.currency,
                    original_amount=adj.amount,
                    applied_amount=converted,
                )
            else:
                raise TypeError(f"not a price adjustment: {adj!r}")
            self.applied_adjustments.append(applied)

        self.sell_price = current

    def calculate_final_price(
        self, converter: CurrencyConverter, adjustments: Iterable[PriceAdjustment]
    ) -> None:
        """Recalculate markup and adjustments from scratch."""
        self.apply_markup(converter)
        self.apply_adjustments(adjustments, converter)

    def to_dict(self) -> dict[str, Any]:
        return {
            "buy_price": str(self.buy_price),
            "sell_price": str(self.sell_price),
            "buy_currency": self.buy_currency.to_dict(),
            "sell_currency": self.sell_currency.to_dict(),
            "markup": None if self.markup is None else markup_to_dict(self.markup),
            "markup_value_in_buy_currency": _optional_str(self.markup_value_in_buy_currency),
            "markup_value_in_sell_currency": _optional_str(self.markup_value_in_sell_currency),
            "converted_buy_price": _optional_str(self.converted_buy_price),
            "buy_currency_rate": _optional_str(self.buy_currency_rate),
            "sell_currency_rate": _optional_str(self.sell_currency_rate),
            "exchange_rate": _optional_str(self.exchange_rate),
            "applied_adjustments": [a.to_dict() for a in self.applied_adjustments],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PricingDetail:
        try:
            markup = data.get("markup")
            return cls(
                buy_price=data["buy_price"],
                buy_currency=Currency.from_dict(data["buy_currency"]),
                sell_currency=Currency.from_dict(data["sell_currency"]),
                sell_price=data.get("sell_price", "0.0"),
                markup=None if markup is None else markup_from_dict(markup),
                markup_value_in_buy_currency=_optional_decimal(
                    data.get("markup_value_in_buy_currency")
                ),
                markup_value_in_sell_currency=_optional_decimal(
                    data.get("markup_value_in_sell_currency")
                ),
                converted_buy_price=_optional_decimal(data.get("converted_buy_price")),
                buy_currency_rate=_optional_decimal(data.get("buy_currency_rate")),
                sell_currency_rate=_optional_decimal(data.get("sell_currency_rate")),
                exchange_rate=_optional_decimal(data.get("exchange_rate")),
                applied_adjustments=[
                    AppliedAdjustment.from_dict(a) for a in data.get("applied_adjustments", [])
                ],
            )
        except KeyError as exc:
            raise ValueError(f"pricing detail is missing field {exc.args[0]!r}") from exc