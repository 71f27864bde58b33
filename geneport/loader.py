"""Loading stock price histories from CSV files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from pathlib import Path

from .stock import Stock

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_row(line: str) -> tuple[str, float] | None:
    """Return (date, close) from a data row, or None if the row is unusable.

    The date is the fourth comma-separated field. The close is the number
    that starts the fifth field, which must be followed by further text.
    """
    fields = line.split(",", 4)
    if len(fields) < 5:
        return None
    date, rest = fields[3], fields[4]
    match = _NUMBER.match(rest)
    if match is None:
        return None
    if not rest[match.end():].strip():
        return None
    return date, float(match.group(1))


def load_stock(filename: str | os.PathLike[str], symbol: str) -> Stock:
    """Read one CSV file (header line first) into a Stock with its returns."""
    stock = Stock(symbol)
    with open(filename, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            row = _parse_row(line.rstrip("\n"))
            if row is not None:
                stock.add_data(*row)
    stock.compute_returns()
    return stock


def load_stocks(
    symbols: Iterable[str], directory: str | os.PathLike[str] = "."
) -> list[Stock]:
    """Load ``<symbol>.csv`` from ``directory`` for each symbol, in order."""
    base = Path(directory)
    return [load_stock(base / f"{symbol}.csv", symbol) for symbol in symbols]