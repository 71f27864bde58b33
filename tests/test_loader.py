import pytest

from geneport.loader import load_stock, load_stocks

HEADER = "Index,Open,High,Date,Close,Volume\n"


def write_csv(path, rows):
    path.write_text(HEADER + "".join(rows), encoding="utf-8")
    return path


def test_load_stock_reads_closes_and_dates(tmp_path):
    path = write_csv(
        tmp_path / "AAA.csv",
        [
            "0,1,2,2024-01-01,100.0,5\n",
            "1,1,2,2024-01-02,110.0,6\n",
            "2,1,2,2024-01-03,121.0,7\n",
        ],
    )
    stock = load_stock(path, "AAA")
    assert stock.symbol == "AAA"
    assert stock.closes == [100.0, 110.0, 121.0]
    assert stock.dates == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert stock.returns == pytest.approx([0.1, 0.1])


def test_row_without_trailing_field_is_skipped(tmp_path):
    path = write_csv(
        tmp_path / "B.csv",
        ["0,1,2,2024-01-01,100.0,5\n", "1,1,2,2024-01-02,130.0\n"],
    )
    assert load_stock(path, "B").closes == [100.0]


def test_malformed_rows_are_skipped(tmp_path):
    path = write_csv(
        tmp_path / "C.csv",
        [
            "0,1,2,2024-01-01,abc,5\n",
            "short,row\n",
            "\n",
            "1,1,2,2024-01-02,50.5,6\n",
        ],
    )
    stock = load_stock(path, "C")
    assert stock.closes == [50.5]
    assert stock.dates == ["2024-01-02"]


def test_header_only_file_has_no_data(tmp_path):
    path = write_csv(tmp_path / "D.csv", [])
    stock = load_stock(path, "D")
    assert stock.closes == []
    assert stock.returns == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_stock(tmp_path / "missing.csv", "missing")


def test_load_stocks_uses_directory_and_keeps_order(tmp_path):
    write_csv(tmp_path / "X.csv", ["0,1,2,d1,10.0,1\n", "1,1,2,d2,20.0,1\n"])
    write_csv(tmp_path / "Y.csv", ["0,1,2,d1,5.0,1\n", "1,1,2,d2,4.0,1\n"])
    stocks = load_stocks(["Y", "X"], tmp_path)
    assert [stock.symbol for stock in stocks] == ["Y", "X"]
    assert stocks[1].closes == [10.0, 20.0]
    assert stocks[0].closes == [5.0, 4.0]


def test_load_stocks_missing_symbol_raises(tmp_path):
    write_csv(tmp_path / "X.csv", ["0,1,2,d1,10.0,1\n"])
    with pytest.raises(FileNotFoundError):
        load_stocks(["X", "NOPE"], tmp_path)