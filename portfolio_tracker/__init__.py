"""Track cash and stock holdings from a CSV history of portfolio transactions."""

__version__ = "0.1.0"
__all__ = ["holding", "transaction", "portfolio", "cli"]