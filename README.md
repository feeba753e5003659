# pricekit

pricekit works out a sell price. You give it a buy price in one currency and the
currency you sell in. You add a markup, then apply taxes, discounts and fixed fees.
pricekit returns the sell price and records every intermediate value along the way.

All amounts are `decimal.Decimal`, so money never passes through binary floating point.
You may also pass an int, a numeric string or a float. A float is converted through its
`repr`, so `0.1` becomes `Decimal("0.1")`.

## Install

```
pip install pricekit
```

To install the test dependencies and run the tests:

```
pip install "pricekit[test]"
pytest
```

## Converting between currencies

`pricekit.currency` provides two classes:

- `Currency(code, name)` is a frozen dataclass.
- `CurrencyConverter` stores exchange rates, each measured against one common base currency.

A conversion computes `amount / rate(source) * rate(target)`. When the source and target
have the same code, the amount is returned unchanged.

```python
from decimal import Decimal
from pricekit.currency import Currency, CurrencyConverter

usd = Currency("USD", "US Dollar")
idr = Currency("IDR", "Indonesian Rupiah")

converter = CurrencyConverter()
converter.add_exchange_rate(usd, Decimal("1.0"))
converter.add_exchange_rate(idr, Decimal("16500.0"))

converter.convert(Decimal("100"), usd, idr) == Decimal("1650000")   # True
converter.get_exchange_rate(idr)               # Decimal('16500.0')
converter.get_exchange_rate(Currency("EUR", "Euro"))   # None
```

`convert` can raise these errors from `pricekit.errors`:

- `RateNotFoundError` when either currency has no rate. The missing code is in `.code`.
- `DivisionByZeroError` when the source rate is zero.

Both are subclasses of `CurrencyConverterError`.

## Markups

`pricekit.markup` provides three kinds of markup:

- `AmountMarkup(value, currency)` adds a fixed amount. The amount is first converted into the buy currency.
- `PercentageMarkup(percentage)` adds `buy_price * percentage / 100`.
- `CommissionMarkup(percentage)` makes the commission that share of the resulting price. It adds `buy_price * pct / (100 - pct)`, and the percentage must be below 100.

`pricekit.pricing.PricingDetail(buy_price, buy_currency, sell_currency)` holds the
calculation. Set its `markup` attribute, then call `apply_markup(converter)`. This call
fills in the following attributes:

- `buy_currency_rate`
- `sell_currency_rate`
- `exchange_rate`, which is the sell rate divided by the buy rate
- `markup_value_in_buy_currency`
- `markup_value_in_sell_currency`
- `converted_buy_price`, which is the buy price plus the markup
- `sell_price`

```python
from pricekit.markup import AmountMarkup, PercentageMarkup
from pricekit.pricing import PricingDetail

pricing = PricingDetail(Decimal("100.0"), usd, idr)
pricing.markup = AmountMarkup(Decimal("3500"), idr)
pricing.apply_markup(converter)

pricing.markup_value_in_buy_currency  # about 0.2121 USD
pricing.sell_price                    # about 1653500 IDR
```

If no markup is set, the markup is zero.

## Adjustments

`pricekit.adjustment` provides three adjustments:

- `Tax(name, percentage)` adds a percentage of the current sell price.
- `Discount(name, percentage)` subtracts a percentage of the current sell price.
- `Fixed(name, amount, currency)` adds an amount, converted into the sell currency.

`apply_adjustments(adjustments, converter)` applies the adjustments in order, each one to
the running sell price. It replaces `applied_adjustments` with one `AppliedAdjustment` per
entry. Each entry records:

- `kind`, an `AdjustmentKind`: `TAX`, `DISCOUNT` or `FIXED`
- `name`
- `percentage`
- `original_currency`
- `original_amount`
- `applied_amount`, which is stated in the sell currency and is negative for a discount

`calculate_final_price(converter, adjustments)` runs `apply_markup` and then
`apply_adjustments`.

```python
from pricekit.adjustment import Tax, Discount, Fixed

pricing = PricingDetail(Decimal("100.0"), usd, idr)
pricing.markup = PercentageMarkup(Decimal("20.0"))
pricing.calculate_final_price(
    converter,
    [
        Tax("Tax 11%", Decimal("11.0")),
        Discount("Discount", Decimal("5.0")),
        Fixed("Promo New Year", Decimal("10.0"), idr),
    ],
)
pricing.sell_price == Decimal("2087920")     # True
[a.applied_amount for a in pricing.applied_adjustments]
# amounts 217800, -109890 and 10
```

Pricing raises a subclass of `pricekit.errors.PricingError` when something fails:

- `RateCalculationFailedError` when a rate is missing or the buy rate is zero, or when an amount markup cannot be converted.
- `InvalidMarkupCalculationError` when a commission is 100% or more.
- `AdjustmentFailedError` when a fixed fee cannot be converted.

`RateCalculationFailedError` and `AdjustmentFailedError` keep the underlying
`CurrencyConverterError` in `.cause`.

## Serialisation

The following can be turned into plain dictionaries and read back:

- `Currency`, `CurrencyConverter`, `AppliedAdjustment` and `PricingDetail`, with `to_dict` / `from_dict`.
- Markups, with `markup_to_dict` / `markup_from_dict`.
- Adjustments, with `adjustment_to_dict` / `adjustment_from_dict`.

Decimals are written as strings, so they keep their exact value. The dictionaries can be
passed straight to `json.dumps`. Reading back raises `ValueError` when a field is missing
or a tag is unknown.

## Demo

```
pricekit-demo
```

This runs two worked examples and prints each pricing breakdown as JSON, followed by the
sell price as a float:

- `pricekit.demo.markup_example()`, the amount-markup case above.
- `pricekit.demo.adjustment_example()`, the percentage markup followed by tax, discount and a fixed fee.

## What pricekit does not do

- It does not fetch exchange rates. You supply every rate yourself.
- It does not round amounts to a currency's minor unit. Round the results yourself when you need to.