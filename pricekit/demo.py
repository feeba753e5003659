"""Worked pricing examples, runnable from the command line."""

from __future__ import annotations

import argparse
import json
from decimal import Decimal
from typing import Optional, Sequence

from .adjustment import Discount, Fixed, Tax
from .currency import Currency, CurrencyConverter
from .markup import AmountMarkup, PercentageMarkup
from .pricing import PricingDetail

USD = Currency("USD", "American Dollar")
IDR = Currency("IDR", "Indonesian Rupiah")


def _converter() -> CurrencyConverter:
    converter = CurrencyConverter()
    converter.add_exchange_rate(USD, Decimal("1.0"))
    converter.add_exchange_rate(IDR, Decimal("16500.0"))
    return converter


def markup_example() -> PricingDetail:
    """Price 100 USD sold in IDR with a fixed 3500 IDR markup."""
    pricing = PricingDetail(Decimal("100.0"), USD, IDR)
    pricing.markup = AmountMarkup(value=Decimal("3500"), currency=IDR)
    pricing.apply_markup(_converter())
    return pricing


def adjustment_example() -> PricingDetail:
    """Price 100 USD with a 20% markup, then tax, discount and a fixed amount."""
    converter = _converter()
    pricing = PricingDetail(Decimal("100.0"), USD, IDR)
    pricing.markup = PercentageMarkup(Decimal("20.0"))
    pricing.apply_markup(converter)

    adjustments = [
        Tax(name="Tax 11%", percentage=Decimal("11.0")),
        Discount(name="Discount", percentage=Decimal("5.0")),
        Fixed(name="Promo New Year", amount=Decimal("10.0"), currency=pricing.sell_currency),
    ]
    pricing.apply_adjustments(adjustments, converter)
    return pricing


def _report(title: str, pricing: PricingDetail) -> None:
    print(f"{title}:")
    print(json.dumps(pricing.to_dict(), indent=2))
    print(f"Total sell price as f64: {float(pricing.sell_price)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the pricing examples.")
    parser.parse_args(argv)
    _report("Pricing after markup", markup_example())
    print()
    _report("Adjustment Pricing", adjustment_example())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())