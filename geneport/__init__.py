"""Genetic search for stock portfolios with the best Sharpe ratio, from CSV price histories."""

__version__ = "0.1.0"

__all__ = ["cli", "genetic", "loader", "portfolio", "stats", "stock"]