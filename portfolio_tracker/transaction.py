"""A single dated portfolio transaction."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TransactionType(enum.Enum):
    """The operations a transaction can perform."""

    DEPOSIT = "DEPOSIT"
    CONVERT = "CONVERT"
    BUY = "BUY"
    SELL = "SELL"
    DIVIDEND = "DIVIDEND"


@dataclass
class Transaction:
    """A dated operation on a ticker, priced in a trade currency.

    Quantities are whole units; fractional quantities are truncated.
    """

    date: str
    kind: TransactionType | str
    quantity: int
    price: float
    ticker: str
    currency: str

    def __post_init__(self) -> None:
        if len(self.date) != 10:
            raise ValueError(f"Invalid date format {self.date!r}, use YYYY-MM-DD")
        try:
            self.kind = TransactionType(self.kind)
        except ValueError:
            allowed = ", ".join(t.value for t in TransactionType)
            raise ValueError(
                f"Invalid type provided: {self.kind}; must be one of ({allowed})"
            ) from None
        self.quantity = int(self.quantity)
        self.price = float(self.price)
        if len(self.ticker) not in (3, 4):
            raise ValueError(f"Invalid ticker: {self.ticker}")
        if len(self.currency) != 3:
            raise ValueError(f"Invalid currency: {self.currency}")

    def year(self) -> str:
        """Return the four-character year part of the date."""
        return self.date[:4]

    def describe(self) -> str:
        """Return a multi-line, human-readable summary of the transaction."""
        return (
            "Transaction:"
            f"\n\tDate: {self.date}"
            f"\n\tType: {self.kind.value}"
            f"\n\tQuantity: {self.quantity}"
            f"\n\tPrice: {self.price:g}"
            f"\n\tTicker: {self.ticker}"
            f"\n\tPurchasing currency: {self.currency}"
        )