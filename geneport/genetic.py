"""A genetic search for the portfolio weighting with the best Sharpe ratio."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .portfolio import Portfolio
from .stock import Stock

ELITE_FRACTION = 0.5


class GeneticGame:
    """A population of random portfolios evolved by selection and crossover."""

    def __init__(
        self,
        stocks: Sequence[Stock],
        population_size: int,
        rng: random.Random | None = None,
    ) -> None:
        self.stocks = list(stocks)
        self.population_size = population_size
        self.rng = rng if rng is not None else random.Random()
        self.portfolios = [
            Portfolio(self.stocks, rng=self.rng) for _ in range(population_size)
        ]

    def display(self, index: int | None = None) -> str:
        """Text of one portfolio, or of the whole population when no index is given."""
        if index is not None:
            return self.portfolios[index].display() + " "
        return "".join(p.display() + " " for p in self.portfolios) + "]"

    def mutation(self, index: int) -> None:
        """Mutate the portfolio at ``index``."""
        self.portfolios[index].mutate(self.rng)

    def crossover(self, first: int, second: int) -> Portfolio:
        """Child portfolio: leading weights of ``first``, the rest from ``second``."""
        cut = self.rng.randrange(len(self.stocks))
        weights = (
            self.portfolios[first].weights[:cut] + self.portfolios[second].weights[cut:]
        )
        total = sum(weights)
        return Portfolio(
            self.stocks, [weight / total for weight in weights], self.rng
        )

    def sort(self) -> None:
        """Order the population from best to worst Sharpe ratio."""
        self.portfolios.sort(reverse=True)

    def new_generation(self) -> None:
        """Drop the weaker half, refill it by crossover, then mutate everyone."""
        self.sort()
        elite = int(self.population_size * ELITE_FRACTION)
        del self.portfolios[len(self.portfolios) - elite:]
        for index in range(1, elite + 1):
            self.portfolios.append(self.crossover(index, index - 1))
        for index in range(self.population_size):
            self.mutation(index)