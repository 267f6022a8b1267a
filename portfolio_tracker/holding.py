"""A position held in a portfolio: either cash in a currency or a stock."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class HoldingType(enum.Enum):
    """The kind of asset a holding represents."""

    CASH = "CASH"
    STOCK = "STOCK"


@dataclass
class Holding:
    """A quantity of one asset, with its average purchase price."""

    quantity: float
    price: float
    ticker: str
    currency: str
    kind: HoldingType | str

    def __post_init__(self) -> None:
        if len(self.ticker) not in (3, 4):
            raise ValueError(f"Invalid ticker: {self.ticker}")
        if len(self.currency) != 3:
            raise ValueError(f"Invalid currency: {self.currency}")
        try:
            self.kind = HoldingType(self.kind)
        except ValueError:
            raise ValueError(f"Invalid type for holding: {self.kind}") from None

    def describe(self) -> str:
        """Return a multi-line, human-readable summary of the holding."""
        return (
            "Holding:"
            f"\n\tQuantity: {self.quantity:g}"
            f"\n\tPrice: {self.price:g}"
            f"\n\tTicker: {self.ticker}"
            f"\n\tPurchasing currency: {self.currency}"
            f"\n\tType: {self.kind.value}"
        )