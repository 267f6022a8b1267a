# portfolio-tracker

A small investment portfolio tracker. It keeps a history of transactions
(deposits, currency conversions, stock purchases and sales, and dividends).
As each transaction is recorded, it updates the current holdings of cash
and stock.

## Installation

```
pip install .
```

## Command line

```
portfolio-tracker [INPUT] [-o OUTPUT] [--name NAME] [--fee FEE] [--dividend-tax RATE]
```

- `INPUT` is the CSV file to import. The default is `transaction_history.csv`.
- `-o`, `--output` is the CSV file the history is exported to. The default
  is `transaction_history_export.csv`.
- `--name` is the portfolio name. The default is `My Portfolio`.
- `--fee` is the fee charged on each buy and sell. The default is `9.95`.
- `--dividend-tax` is stored on the portfolio and is not applied to
  dividends. The default is `0.15`.

The command imports the input file and prints every transaction that was
applied. It then prints a line of `=` signs and every holding. Last, it
writes the history to the output file.

If the import or the export fails, the command reports the error on
standard error and exits with status 1. It still prints and exports
whatever was imported before the failure.

## CSV format

The file starts with a header line. Each line after it holds one
transaction:

```
date,ticker,type,quantity,price,trade_currency
2024-05-01,CAD,DEPOSIT,1000,1,CAD
2024-05-01,USD,CONVERT,700,1.3,CAD
2024-05-02,NVDA,BUY,10,10.95,USD
2024-06-01,NVDA,SELL,5,13.95,USD
```

- `date` must be ten characters long, written as `YYYY-MM-DD`.
- `ticker` is three or four characters long. For cash it is the currency code.
- `type` is one of `DEPOSIT`, `CONVERT`, `BUY`, `SELL` or `DIVIDEND`.
- `quantity` is truncated to a whole number.
- `trade_currency` is three characters long.

The import skips blank lines. It stops with `PortfolioError` at the first
line that has fewer than six fields, has an invalid field, or cannot be
applied. The transactions before that line stay applied. On export,
prices are written in short form (`1.3`, `10.95`, `1`).

## Rules applied to each transaction

- **DEPOSIT** adds the quantity to the cash holding named by the ticker.
  If that holding does not exist yet, it is created.
- **CONVERT** spends `quantity × price` of the trade currency to get
  `quantity` of the target currency. The trade currency must be held, and
  there must be enough of it. The target holding's average price is updated.
- **BUY** spends `quantity × price` plus the transaction fee from the trade
  currency. The trade currency must be held, and there must be enough of
  it. The holding's average price is updated.
- **SELL** needs enough of the stock held, and enough of the trade currency
  to pay the fee. It adds `quantity × price` minus the fee to the trade
  currency.
- **DIVIDEND** pays `quantity × price` for each share held into the trade
  currency. The stock must be held. The dividend tax is not deducted.

When a transaction's date falls in a different year from the one before
it, the portfolio records the book value of its holdings for the earlier
year in `value_by_year`. Book value is the sum of quantity × average price
across all holdings, in mixed currencies.

## Library use

```python
from portfolio_tracker.portfolio import Portfolio, PortfolioError

p = Portfolio("My Portfolio", 9.95, 0.15)
p.record("2024-05-01", "DEPOSIT", 1000, 1.0, "CAD", "CAD")
p.record("2024-05-02", "CONVERT", 700, 1.3, "USD", "CAD")

try:
    p.record("2024-05-03", "BUY", 1000, 10.95, "NVDA", "USD")
except PortfolioError as exc:
    print("rejected:", exc)

print(p.describe_holdings())
print(p.describe_transactions())

p.export_csv("history.csv")

copy = Portfolio("Copy", 9.95, 0.15)
count = copy.import_csv("history.csv")
```

- `Portfolio.record` builds a `Transaction` and adds it. The built
  transaction is returned.
- `Portfolio.add_transaction` takes a `portfolio_tracker.transaction.Transaction`
  that you have built yourself.
- `Portfolio.holdings` maps each ticker to its
  `portfolio_tracker.holding.Holding`. `Portfolio.transactions` lists the
  transactions that were applied, in order.
- `Portfolio.calculate_value(year)` records the current book value under
  `year` and returns it.

Invalid fields (wrong date length, unknown type, bad ticker or currency
length) raise `ValueError` when the `Transaction` or `Holding` is built.
A transaction that cannot be applied raises `PortfolioError` and is not
added to the history. Empty holdings that were opened for it before the
check failed are kept, at quantity 0. For example, a rejected buy leaves
a zero holding of its ticker.

## What it does not do

It does not fetch market prices or convert between currencies for
reporting. Values are book values in the prices recorded. It keeps no
storage other than the CSV files you import and export.

## Running the tests

```
pip install .[test]
pytest
```