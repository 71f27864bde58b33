"""Summary statistics over a series of periodic returns."""

from __future__ import annotations

import math
from collections.abc import Iterable


class ReturnSeries:
    """A series of returns with its mean and population standard deviation."""

    def __init__(self, returns: Iterable[float] = ()) -> None:
        self._set_returns(returns)

    def _set_returns(self, returns: Iterable[float]) -> None:
        """Replace the returns and recompute mean and standard deviation."""
        self.returns: list[float] = [float(value) for value in returns]
        count = len(self.returns)
        if not count:
            self.mean = math.nan
            self.std = 0.0
            return
        self.mean = sum(self.returns) / count
        squares = sum((value - self.mean) ** 2 for value in self.returns)
        self.std = math.sqrt(squares / count)

    def covariance(self, other: ReturnSeries) -> float:
        """Population covariance between this series and ``other``.

        Only the first ``len(self.returns)`` values of ``other`` are used.
        """
        count = len(self.returns)
        if len(other.returns) < count:
            raise ValueError(
                f"other series has {len(other.returns)} returns, need at least {count}"
            )
        if not count:
            return math.nan
        total = sum(
            (mine - self.mean) * (theirs - other.mean)
            for mine, theirs in zip(self.returns, other.returns)
        )
        return total / count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={len(self.returns)}, "
            f"mean={self.mean!r}, std={self.std!r})"
        )