"""A traded stock: its closing prices and the returns derived from them."""

from __future__ import annotations

from itertools import pairwise

from .stats import ReturnSeries


class Stock(ReturnSeries):
    """Dated closing prices for one ticker symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__()
        self.symbol = symbol
        self.dates: list[str] = []
        self.closes: list[float] = []

    def add_data(self, date: str, close: float) -> None:
        """Append one dated closing price."""
        self.dates.append(date)
        self.closes.append(float(close))

    def compute_returns(self) -> None:
        """Derive simple period-over-period returns from the closes."""
        self._set_returns(
            (current - previous) / previous
            for previous, current in pairwise(self.closes)
        )

    def __repr__(self) -> str:
        return f"Stock({self.symbol!r}, closes={len(self.closes)})"