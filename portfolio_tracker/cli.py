"""Command line entry point: load a transaction history, show it, export it."""

from __future__ import annotations

import argparse
import sys

from portfolio_tracker.portfolio import Portfolio, PortfolioError


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-tracker",
        description="Replay a CSV transaction history and report holdings.",
    )
    parser.add_argument(
        "input", nargs="?", default="transaction_history.csv",
        help="CSV file of transactions to import",
    )
    parser.add_argument(
        "-o", "--output", default="transaction_history_export.csv",
        help="CSV file to export the history to",
    )
    parser.add_argument("--name", default="My Portfolio")
    parser.add_argument("--fee", type=float, default=9.95, help="fee per trade")
    parser.add_argument("--dividend-tax", type=float, default=0.15)
    return parser


def main(argv=None) -> int:
    """Import, print and export a portfolio; return the exit status."""
    args = _parser().parse_args(argv)
    portfolio = Portfolio(args.name, args.fee, args.dividend_tax)
    status = 0

    try:
        portfolio.import_csv(args.input)
    except (OSError, PortfolioError) as exc:
        print(f"Import failed: {exc}", file=sys.stderr)
        status = 1

    print(portfolio.describe_transactions())
    print("=====================")
    print(portfolio.describe_holdings())

    try:
        portfolio.export_csv(args.output)
    except OSError as exc:
        print(f"Export failed: {exc}", file=sys.stderr)
        status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())