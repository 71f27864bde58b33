import statistics

import pytest

from geneport.stock import Stock


def make_stock(closes):
    stock = Stock("TEST")
    for day, close in enumerate(closes):
        stock.add_data(f"2024-01-{day + 1:02d}", close)
    return stock


def test_add_data_keeps_dates_and_closes_in_order():
    stock = make_stock([100.0, 110.0])
    assert stock.symbol == "TEST"
    assert stock.dates == ["2024-01-01", "2024-01-02"]
    assert stock.closes == [100.0, 110.0]


def test_new_stock_has_no_returns():
    stock = Stock("X")
    assert stock.returns == []
    assert stock.std == 0.0


def test_compute_returns_simple_returns():
    stock = make_stock([100.0, 110.0, 99.0])
    stock.compute_returns()
    assert stock.returns == pytest.approx([0.1, -0.1])


def test_returns_are_one_shorter_than_closes():
    closes = [10.0, 12.0, 9.0, 15.0, 14.0]
    stock = make_stock(closes)
    stock.compute_returns()
    assert len(stock.returns) == len(closes) - 1


def test_compute_returns_updates_statistics():
    stock = make_stock([10.0, 12.0, 9.0, 15.0, 14.0])
    stock.compute_returns()
    assert stock.mean == pytest.approx(statistics.fmean(stock.returns))
    assert stock.std == pytest.approx(statistics.pstdev(stock.returns))


def test_compute_returns_twice_gives_same_result():
    stock = make_stock([10.0, 12.0, 9.0])
    stock.compute_returns()
    first = list(stock.returns)
    stock.compute_returns()
    assert stock.returns == first


def test_single_close_gives_no_returns():
    stock = make_stock([42.0])
    stock.compute_returns()
    assert stock.returns == []
    assert stock.std == 0.0


def test_zero_close_raises():
    stock = make_stock([0.0, 10.0])
    with pytest.raises(ZeroDivisionError):
        stock.compute_returns()