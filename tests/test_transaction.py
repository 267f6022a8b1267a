import pytest

from portfolio_tracker.transaction import Transaction, TransactionType


def test_describe_lists_every_field():
    t = Transaction("2024-03-01", "BUY", 10, 24.56, "NVDA", "USD")
    assert t.describe() == (
        "Transaction:\n\tDate: 2024-03-01\n\tType: BUY\n\tQuantity: 10"
        "\n\tPrice: 24.56\n\tTicker: NVDA\n\tPurchasing currency: USD"
    )


def test_kind_string_becomes_enum():
    t = Transaction("2024-03-01", "DIVIDEND", 1, 0.5, "NVDA", "USD")
    assert t.kind is TransactionType.DIVIDEND


def test_year():
    t = Transaction("2024-03-01", "BUY", 10, 24.56, "NVDA", "USD")
    assert t.year() == "2024"


def test_quantity_is_truncated_to_whole_units():
    t = Transaction("2024-03-01", "BUY", 10.7, 24.56, "NVDA", "USD")
    assert t.quantity == 10


def test_invalid_type_rejected():
    with pytest.raises(ValueError, match="Invalid type"):
        Transaction("2024-03-01", "GOLDSD", 10, 24.56, "NVDA", "USD")


@pytest.mark.parametrize("date", ["2024-3-1", "2024-03-011", ""])
def test_invalid_date_rejected(date):
    with pytest.raises(ValueError, match="Invalid date"):
        Transaction(date, "BUY", 10, 24.56, "NVDA", "USD")


def test_invalid_ticker_rejected():
    with pytest.raises(ValueError, match="Invalid ticker"):
        Transaction("2024-03-01", "BUY", 10, 24.56, "GOOGLE", "USD")


def test_invalid_currency_rejected():
    with pytest.raises(ValueError, match="Invalid currency"):
        Transaction("2024-03-01", "BUY", 10, 24.56, "NVDA", "USDDS")