"""A portfolio of holdings driven by a history of transactions."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from os import PathLike

from portfolio_tracker.holding import Holding, HoldingType
from portfolio_tracker.transaction import Transaction, TransactionType

CSV_HEADER = ["date", "ticker", "type", "quantity", "price", "trade_currency"]


class PortfolioError(Exception):
    """Raised when a transaction cannot be applied to the portfolio."""


def _average_in(holding: Holding, quantity: int, price: float) -> None:
    total = holding.quantity + quantity
    if total:
        holding.price = (holding.quantity * holding.price + quantity * price) / total
    holding.quantity = total


@dataclass
class Portfolio:
    """Holdings keyed by ticker, plus every transaction that built them."""

    name: str = ""
    transaction_fee: float = 0.0
    dividend_tax: float = 0.0
    transactions: list[Transaction] = field(default_factory=list)
    holdings: dict[str, Holding] = field(default_factory=dict)
    value_by_year: dict[str, float] = field(default_factory=dict)

    def record(self, date, type, quantity, price, ticker, currency) -> Transaction:
        """Build a transaction from its fields and add it."""
        transaction = Transaction(date, type, quantity, price, ticker, currency)
        self.add_transaction(transaction)
        return transaction

    def add_transaction(self, transaction: Transaction) -> None:
        """Apply a transaction to the holdings and append it to the history."""
        self._apply(transaction)
        if self.transactions:
            previous_year = self.transactions[-1].year()
            if previous_year != transaction.year():
                self.calculate_value(previous_year)
        self.transactions.append(transaction)

    def add_holding(self, ticker: str, holding: Holding) -> Holding:
        """Store a holding under ticker unless one is already there; return the stored one."""
        return self.holdings.setdefault(ticker, holding)

    def calculate_value(self, year: str) -> float:
        """Record and return the book value of all holdings at the close of year."""
        value = sum(h.quantity * h.price for h in self.holdings.values())
        self.value_by_year[year] = value
        return value

    def _open(self, ticker: str, currency: str, kind: HoldingType) -> Holding:
        return self.add_holding(ticker, Holding(0, 1, ticker, currency, kind))

    def _apply(self, t: Transaction) -> None:
        if t.kind is TransactionType.DEPOSIT:
            cash = self.holdings.get(t.ticker) or self._open(
                t.ticker, t.currency, HoldingType.CASH
            )
            cash.quantity += t.quantity
            return

        holding = self.holdings.get(t.ticker)
        cash = self.holdings.get(t.currency)

        if cash is None:
            if t.kind is TransactionType.CONVERT:
                raise PortfolioError(
                    f"Can't convert {t.currency} to {t.ticker} since no {t.currency} held"
                )
            if t.kind is TransactionType.BUY:
                raise PortfolioError(f"Can't buy, do not hold {t.currency}")
            cash = self._open(t.currency, t.currency, HoldingType.CASH)

        if holding is None:
            if t.kind is TransactionType.DIVIDEND:
                raise PortfolioError(f"No stock of {t.ticker}")
            if t.kind is TransactionType.SELL:
                raise PortfolioError(f"No holdings of {t.ticker} found")
            kind = (
                HoldingType.CASH
                if t.kind is TransactionType.CONVERT
                else HoldingType.STOCK
            )
            holding = self._open(t.ticker, t.currency, kind)

        cash_held = cash.quantity
        total_price = t.quantity * t.price
        fee = self.transaction_fee

        if t.kind is TransactionType.CONVERT:
            if cash_held < total_price:
                raise PortfolioError(
                    f"Insufficient {t.currency} to convert to {t.ticker}"
                )
            cash.quantity = cash_held - total_price
            _average_in(holding, t.quantity, t.price)
        elif t.kind is TransactionType.BUY:
            if cash_held < total_price + fee:
                raise PortfolioError("Insufficient cash for transaction")
            cash.quantity = cash_held - fee - total_price
            _average_in(holding, t.quantity, t.price)
        elif t.kind is TransactionType.SELL:
            if cash_held < fee:
                raise PortfolioError("Insufficient cash for transaction")
            if holding.quantity < t.quantity:
                raise PortfolioError(
                    f"Insufficient amount of {t.ticker} held for sale transaction"
                )
            cash.quantity = cash_held - fee + total_price
            holding.quantity -= t.quantity
        else:
            cash.quantity += total_price * holding.quantity

    def export_csv(self, path: str | PathLike) -> None:
        """Write the transaction history to a CSV file."""
        with open(path, "w", newline="") as handle:
            handle.write(",".join(CSV_HEADER) + "\n")
            for t in self.transactions:
                handle.write(
                    f"{t.date},{t.ticker},{t.kind.value},{t.quantity},"
                    f"{t.price:g},{t.currency}\n"
                )

    def import_csv(self, path: str | PathLike) -> int:
        """Read transactions from a CSV file, applying each in order.

        Returns the number of transactions added. Stops at the first bad line
        with PortfolioError; transactions before it stay applied.
        """
        added = 0
        with open(path, newline="") as handle:
            reader = csv.reader(handle)
            next(reader, None)
            for line_number, row in enumerate(reader, start=2):
                if not row:
                    continue
                if len(row) < 6:
                    raise PortfolioError(f"line {line_number}: expected 6 fields")
                date, ticker, kind, quantity, price, currency = row[:6]
                try:
                    transaction = Transaction(
                        date, kind, float(quantity), float(price), ticker, currency
                    )
                    self.add_transaction(transaction)
                except (ValueError, PortfolioError) as exc:
                    raise PortfolioError(
                        f"line {line_number}: error adding transaction: {exc}"
                    ) from exc
                added += 1
        return added

    def describe_holdings(self) -> str:
        """Return a summary of every current holding."""
        parts = ["PRINTING HOLDINGS"]
        parts.extend(h.describe() for h in self.holdings.values())
        return "\n".join(parts)

    def describe_transactions(self) -> str:
        """Return a summary of every recorded transaction."""
        parts = ["PRINTING TRANSACTIONS"]
        parts.extend(t.describe() for t in self.transactions)
        return "\n".join(parts)