import pytest

from portfolio_tracker.holding import Holding, HoldingType


def test_describe_lists_every_field():
    holding = Holding(10, 24.56, "NVDA", "USD", "STOCK")
    assert holding.describe() == (
        "Holding:\n\tQuantity: 10\n\tPrice: 24.56\n\tTicker: NVDA"
        "\n\tPurchasing currency: USD\n\tType: STOCK"
    )


def test_string_kind_becomes_enum():
    holding = Holding(0, 1, "CAD", "CAD", "CASH")
    assert holding.kind is HoldingType.CASH


def test_enum_kind_is_kept():
    holding = Holding(5, 2.5, "IBM", "USD", HoldingType.STOCK)
    assert holding.kind is HoldingType.STOCK
    assert holding.quantity == 5


@pytest.mark.parametrize("ticker", ["AB", "GOOGLE", ""])
def test_invalid_ticker_rejected(ticker):
    with pytest.raises(ValueError, match="Invalid ticker"):
        Holding(1, 1, ticker, "USD", "STOCK")


def test_invalid_currency_rejected():
    with pytest.raises(ValueError, match="Invalid currency"):
        Holding(10, 24.56, "NVDA", "USDDS", "STOCK")


def test_invalid_kind_rejected():
    with pytest.raises(ValueError, match="Invalid type"):
        Holding(1, 1, "NVDA", "USD", "BOND")


@pytest.mark.parametrize("ticker", ["USD", "NVDA"])
def test_valid_ticker_lengths(ticker):
    assert Holding(1, 1, ticker, "USD", "STOCK").ticker == ticker