# geneport

geneport searches for a stock portfolio with a high Sharpe ratio. It runs a
simple genetic algorithm over a population of randomly weighted portfolios.

## How the search works

- Every portfolio starts with random weights drawn in steps of 0.01 that add
  up to one.
- A portfolio's return series is the weighted sum of its stocks' returns. Its
  Sharpe ratio is the mean of that series divided by its population standard
  deviation. The risk-free rate is 0. If the standard deviation is zero, the
  ratio is `inf`, `-inf` or `nan`; no error is raised.
- Each generation the population is sorted from the best Sharpe ratio to the
  worst, and the weaker half is dropped.
- The dropped half is refilled with children. Each child is a one-point
  crossover between neighbouring survivors: the leading weights come from one
  parent and the rest from the other. The child's weights are then divided by
  their sum.
- Every portfolio is then mutated. A mutation takes a random number of whole
  hundredths, less than the chosen weight's own hundredths, from one randomly
  chosen weight and moves it to the next weight. After the last weight it
  wraps around to the first. The total stays the same. Mutation changes only
  the weights. The return series and Sharpe ratio are not recomputed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input data

Each stock is read from a CSV file named after its ticker, for example
`TSLA.csv`.

- The first line is a header and is skipped.
- On every other line the fourth field is taken as the date.
- The fifth field must begin with a number, which is taken as the closing
  price. Leading spaces are allowed.
- There must be more text after that number, for example further columns.
- Lines that do not fit this shape are ignored.

Returns are computed from consecutive closing prices as
`(close - previous) / previous`.

`load_stock` raises `OSError` when a file cannot be opened.

## Command line

```
geneport [SYMBOL ...] [-d DIRECTORY] [-p PORTFOLIOS] [-g GENERATIONS] [-s SEED]
```

- `SYMBOL ...`: the tickers. `<SYMBOL>.csv` is read for each one. The default
  is MARA, TSLA, NIO, AMD, SOFI, RIOT, INTC, AAPL, F, PFE, PLTR and T.
- `-d`, `--directory`: the directory holding the CSV files. The default is the
  current directory.
- `-p`, `--portfolios`: the population size. The default is 100.
- `-g`, `--generations`: the number of generations. The default is 100.
- `-s`, `--seed`: a random seed, for reproducible runs.

For each generation the command prints the generation number. It then prints
the weights and Sharpe ratio of the best portfolio and of the worst.

If a CSV file cannot be opened, it prints `Error opening file: <name>` to
standard error and exits with status 1.

## Library use

```python
import random
import sys

from geneport.cli import run
from geneport.genetic import GeneticGame
from geneport.loader import load_stocks

stocks = load_stocks(["AAPL", "INTC", "PFE"], "data")
game = GeneticGame(stocks, 50, random.Random(42))
run(game, 20, sys.stdout)
```

The building blocks can also be used on their own.

`geneport.stats.ReturnSeries`
: Holds `returns` with their `mean` and population `std`. `covariance(other)`
  gives the population covariance with another series. It raises `ValueError`
  if `other` is shorter than this series.

`geneport.stock.Stock`
: Collects `dates` and `closes` with `add_data(date, close)`.
  `compute_returns()` turns the closes into returns.

`geneport.loader.load_stock(filename, symbol)` and `load_stocks(symbols, directory)`
: Read stocks from CSV files.

`geneport.portfolio.Portfolio(stocks, weights=None, rng=None)`
: Combines stocks with a set of weights. Random weights are drawn when none
  are given. It exposes `sharpe_ratio`, `weights` and `covariance_matrix`, and
  offers `display()` and `mutate(rng=None)`. Portfolios compare by Sharpe
  ratio. `Portfolio.random_weights(count, rng)` draws a valid set of weights.
  `ValueError` is raised for:
  - an empty list of stocks;
  - a count of weights that does not match the stocks;
  - stocks with fewer returns than the first;
  - a mutation when no weight is at least 0.01.

`geneport.genetic.GeneticGame(stocks, population_size, rng=None)`
: Holds the population in `portfolios`. It offers `sort()`,
  `crossover(first, second)`, `mutation(index)`, `display(index=None)` and
  `new_generation()`.

Pass your own `random.Random` instance to get reproducible runs.

## What it does not do

geneport does not download price data. It only reads CSV files that are
already on disk. It keeps no record of past runs, and it writes results only
as text on standard output.