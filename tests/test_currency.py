from decimal import Decimal

import pytest

from pricekit.currency import Currency, CurrencyConverter
from pricekit.errors import DivisionByZeroError, RateNotFoundError

USD = Currency("USD", "US Dollar")
IDR = Currency("IDR", "Indonesian Rupiah")
EUR = Currency("EUR", "Euro")


@pytest.fixture
def converter():
    conv = CurrencyConverter()
    conv.add_exchange_rate(USD, Decimal("1.0"))
    conv.add_exchange_rate(IDR, Decimal("16500.0"))
    return conv


def test_currency_fields():
    assert USD.code == "USD"
    assert USD.name == "US Dollar"


def test_currency_equality_and_hash():
    other = Currency("USD", "US Dollar")
    assert other == USD
    assert len({USD, other, IDR}) == 2


def test_currency_round_trip():
    assert Currency.from_dict(IDR.to_dict()) == IDR
    assert IDR.to_dict() == {"code": "IDR", "name": "Indonesian Rupiah"}


def test_currency_from_dict_missing_field():
    with pytest.raises(ValueError):
        Currency.from_dict({"code": "USD"})


def test_get_exchange_rate(converter):
    assert converter.get_exchange_rate(USD) == Decimal("1.0")
    assert converter.get_exchange_rate(IDR) == Decimal("16500.0")
    assert converter.get_exchange_rate(EUR) is None


def test_add_exchange_rate_overwrites(converter):
    converter.add_exchange_rate(IDR, Decimal("16000"))
    assert converter.get_exchange_rate(IDR) == Decimal("16000")


def test_add_exchange_rate_coerces_to_decimal():
    conv = CurrencyConverter()
    conv.add_exchange_rate(USD, "2.5")
    assert conv.get_exchange_rate(USD) == Decimal("2.5")


def test_convert_usd_to_idr(converter):
    assert converter.convert(Decimal("100.0"), USD, IDR) == Decimal("1650000.0")


def test_convert_idr_to_usd(converter):
    assert converter.convert(Decimal("49500.0"), IDR, USD) == Decimal("3.0")


def test_convert_same_currency_returns_amount_without_rates():
    conv = CurrencyConverter()
    assert conv.convert(Decimal("42.5"), EUR, EUR) == Decimal("42.5")


def test_convert_round_trip(converter):
    amount = Decimal("123.45")
    there = converter.convert(amount, USD, IDR)
    back = converter.convert(there, IDR, USD)
    assert abs(back - amount) < Decimal("0.0000001")


def test_convert_missing_source_rate(converter):
    with pytest.raises(RateNotFoundError) as info:
        converter.convert(Decimal("1"), EUR, USD)
    assert info.value.code == "EUR"


def test_convert_missing_target_rate(converter):
    with pytest.raises(RateNotFoundError) as info:
        converter.convert(Decimal("1"), USD, EUR)
    assert info.value.code == "EUR"


def test_convert_zero_source_rate(converter):
    converter.add_exchange_rate(EUR, Decimal("0"))
    with pytest.raises(DivisionByZeroError):
        converter.convert(Decimal("1"), EUR, USD)


def test_convert_zero_target_rate_gives_zero(converter):
    converter.add_exchange_rate(EUR, Decimal("0"))
    assert converter.convert(Decimal("10"), USD, EUR).is_zero()


def test_converter_round_trip(converter):
    data = converter.to_dict()
    assert data["exchange_rates"]["IDR"] == "16500.0"
    assert CurrencyConverter.from_dict(data) == converter


def test_converter_from_dict_missing_rates():
    with pytest.raises(ValueError):
        CurrencyConverter.from_dict({})


def test_invalid_rate_rejected():
    with pytest.raises(ValueError):
        CurrencyConverter().add_exchange_rate(USD, "abc")