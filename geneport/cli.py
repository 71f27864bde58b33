"""Command line entry point: evolve portfolios over a set of stock histories."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from typing import TextIO

from .genetic import GeneticGame
from .loader import load_stocks

DEFAULT_SYMBOLS = (
    "MARA", "TSLA", "NIO", "AMD", "SOFI", "RIOT",
    "INTC", "AAPL", "F", "PFE", "PLTR", "T",
)
DEFAULT_PORTFOLIOS = 100
DEFAULT_GENERATIONS = 100


def run(game: GeneticGame, generations: int, out: TextIO | None = None) -> None:
    """Evolve ``game`` and report the best and worst portfolio of each generation."""
    out = out if out is not None else sys.stdout
    for generation in range(generations):
        game.sort()
        best, worst = game.portfolios[0], game.portfolios[-1]
        print(f"generation {generation}", file=out)
        print(f"best portfolio : {best.display()}", file=out)
        print(f"best sharp ratio : {best.sharpe_ratio:g}", file=out)
        print(f"worst portfolio : {worst.display()}", file=out)
        print(f"worst sharp ratio : {worst.sharpe_ratio:g}", file=out)
        game.new_generation()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geneport",
        description="Search portfolio weights with a genetic algorithm.",
    )
    parser.add_argument("symbols", nargs="*", default=list(DEFAULT_SYMBOLS),
                        help="ticker symbols; <SYMBOL>.csv is read for each")
    parser.add_argument("-d", "--directory", default=".",
                        help="directory holding the CSV files")
    parser.add_argument("-p", "--portfolios", type=int, default=DEFAULT_PORTFOLIOS,
                        help="population size")
    parser.add_argument("-g", "--generations", type=int, default=DEFAULT_GENERATIONS,
                        help="number of generations")
    parser.add_argument("-s", "--seed", type=int, default=None,
                        help="random seed")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search; returns the process exit status."""
    args = _parser().parse_args(argv)
    try:
        stocks = load_stocks(args.symbols, args.directory)
    except OSError as error:
        print(f"Error opening file: {error.filename}", file=sys.stderr)
        return 1
    game = GeneticGame(stocks, args.portfolios, random.Random(args.seed))
    run(game, args.generations, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())