from decimal import Decimal

import pytest

from pricekit.adjustment import (
    AdjustmentKind,
    AppliedAdjustment,
    Discount,
    Fixed,
    Tax,
    adjustment_from_dict,
    adjustment_to_dict,
)
from pricekit.currency import Currency

USD = Currency("USD", "US Dollar")
IDR = Currency("IDR", "Indonesian Rupiah")


def test_tax_and_discount_fields():
    tax = Tax(name="Tax 11%", percentage=Decimal("11.0"))
    discount = Discount(name="Discount 5%", percentage=Decimal("5.0"))
    assert tax.name == "Tax 11%"
    assert tax.percentage == Decimal("11.0")
    assert discount.name == "Discount 5%"
    assert discount.percentage == Decimal("5.0")


def test_fixed_coerces_amount():
    fee = Fixed(name="Admin Fee", amount=2.0, currency=USD)
    assert fee.amount == Decimal("2.0")
    assert fee.currency == USD


def test_adjustment_kind_values():
    assert AdjustmentKind("tax") is AdjustmentKind.TAX
    assert AdjustmentKind("discount") is AdjustmentKind.DISCOUNT
    assert AdjustmentKind("fixed") is AdjustmentKind.FIXED


@pytest.mark.parametrize(
    "adjustment",
    [
        Tax(name="Tax 11%", percentage=Decimal("11.0")),
        Discount(name="Discount 5%", percentage=Decimal("5.0")),
        Fixed(name="Promo New Year", amount=Decimal("10.0"), currency=IDR),
    ],
)
def test_adjustment_round_trip(adjustment):
    assert adjustment_from_dict(adjustment_to_dict(adjustment)) == adjustment


def test_adjustment_to_dict_tax():
    data = adjustment_to_dict(Tax(name="Tax 11%", percentage=Decimal("11.0")))
    assert data == {"price_adjustment": "tax", "name": "Tax 11%", "percentage": "11.0"}


def test_adjustment_from_dict_unknown():
    with pytest.raises(ValueError):
        adjustment_from_dict({"price_adjustment": "rebate", "name": "x"})


def test_adjustment_from_dict_missing_field():
    with pytest.raises(ValueError):
        adjustment_from_dict({"price_adjustment": "fixed", "name": "x", "amount": "1"})


def test_adjustment_to_dict_rejects_other():
    with pytest.raises(TypeError):
        adjustment_to_dict({"name": "Tax"})


def test_applied_tax_record():
    applied = AppliedAdjustment(
        kind=AdjustmentKind.TAX,
        name="Tax 11%",
        percentage=Decimal("11.0"),
        original_currency=IDR,
        applied_amount=Decimal("1996500.0"),
    )
    assert applied.kind == AdjustmentKind.TAX
    assert applied.name == "Tax 11%"
    assert applied.original_amount is None
    assert applied.applied_amount > Decimal("0.0")


def test_applied_to_dict_omits_unset_fields():
    applied = AppliedAdjustment(
        kind=AdjustmentKind.DISCOUNT,
        name="Discount 5%",
        percentage=Decimal("5.0"),
        applied_amount=Decimal("-1007325.0"),
    )
    data = applied.to_dict()
    assert "original_amount" not in data
    assert "original_currency" not in data
    assert data["kind"] == "discount"
    assert data["applied_amount"] == "-1007325.0"


@pytest.mark.parametrize(
    "applied",
    [
        AppliedAdjustment(
            kind=AdjustmentKind.TAX,
            name="Tax 11%",
            percentage=Decimal("11.0"),
            original_currency=IDR,
            applied_amount=Decimal("1996500.0"),
        ),
        AppliedAdjustment(
            kind=AdjustmentKind.FIXED,
            name="Promo New Year",
            original_currency=IDR,
            original_amount=Decimal("10.0"),
            applied_amount=Decimal("10.0"),
        ),
    ],
)
def test_applied_round_trip(applied):
    assert AppliedAdjustment.from_dict(applied.to_dict()) == applied


def test_applied_from_dict_missing_field():
    with pytest.raises(ValueError):
        AppliedAdjustment.from_dict({"kind": "tax", "name": "Tax 11%"})


def test_applied_kind_accepts_string():
    applied = AppliedAdjustment(kind="fixed", name="Fee", applied_amount="1")
    assert applied.kind is AdjustmentKind.FIXED
    assert applied.applied_amount == Decimal("1")