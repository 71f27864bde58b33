"""Weighted portfolios of stocks, scored by their Sharpe ratio."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from .stats import ReturnSeries
from .stock import Stock

RISK_FREE_RATE = 0.0
_WEIGHT_STEPS = 100


def _ratio(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


class Portfolio(ReturnSeries):
    """A weighting of stocks with the resulting return series and Sharpe ratio."""

    def __init__(
        self,
        stocks: Sequence[Stock],
        weights: Sequence[float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.stocks = list(stocks)
        if not self.stocks:
            raise ValueError("a portfolio needs at least one stock")
        self._rng = rng if rng is not None else random.Random()
        if weights is None:
            self.weights = self.random_weights(len(self.stocks), self._rng)
        else:
            self.weights = [float(weight) for weight in weights]
            if len(self.weights) != len(self.stocks):
                raise ValueError(
                    f"{len(self.weights)} weights given for {len(self.stocks)} stocks"
                )

        periods = len(self.stocks[0].returns)
        if any(len(stock.returns) < periods for stock in self.stocks):
            raise ValueError("every stock needs as many returns as the first one")
        columns = zip(*(stock.returns[:periods] for stock in self.stocks))
        super().__init__(
            sum(weight * value for weight, value in zip(self.weights, column))
            for column in columns
        )

        self.covariance_matrix = [
            [first.covariance(second) for second in self.stocks]
            for first in self.stocks
        ]
        self.sharpe_ratio = _ratio(self.mean - RISK_FREE_RATE, self.std)

    @staticmethod
    def random_weights(count: int, rng: random.Random) -> list[float]:
        """Draw ``count`` weights in steps of 0.01 that add up to one."""
        if count < 1:
            raise ValueError("need at least one weight")
        remaining = _WEIGHT_STEPS
        weights = []
        for _ in range(count - 1):
            step = rng.randrange(remaining)
            remaining -= step
            weights.append(step / 100)
        weights.append(remaining / 100)
        return weights

    def display(self) -> str:
        """The weights as text, e.g. ``[ 0.500000 0.500000 ]``."""
        return "[ " + "".join(f"{weight:f} " for weight in self.weights) + "]"

    def mutate(self, rng: random.Random | None = None) -> None:
        """Move a random part of one weight to the next one, wrapping around.

        The return statistics and Sharpe ratio are left as they were.
        """
        rng = rng if rng is not None else self._rng
        count = len(self.weights)
        if not any(int(weight * 100) > 0 for weight in self.weights):
            raise ValueError("no weight is large enough to mutate")
        while True:
            index = rng.randrange(count)
            bound = int(self.weights[index] * 100)
            if bound > 0:
                break
        delta = rng.randrange(bound) / 100
        self.weights[index] -= delta
        self.weights[(index + 1) % count] += delta

    def __lt__(self, other: Portfolio) -> bool:
        return self.sharpe_ratio < other.sharpe_ratio

    def __repr__(self) -> str:
        return f"Portfolio({self.display()}, sharpe_ratio={self.sharpe_ratio!r})"