import pytest

from stockapi.models import Stock


def test_defaults_are_zero_values():
    assert Stock() == Stock(stock_id=0, name="", price=0, company="")


def test_to_dict_uses_json_keys_in_declared_order():
    stock = Stock(stock_id=3, name="Acme", price=120, company="Acme Corp")
    assert list(stock.to_dict()) == ["stockid", "name", "price", "company"]
    assert stock.to_dict()["name"] == "Acme"


def test_round_trip():
    stock = Stock(stock_id=7, name="Widget", price=55, company="Widgets Ltd")
    assert Stock.from_dict(stock.to_dict()) == stock


def test_keys_match_case_insensitively():
    stock = Stock.from_dict({"NAME": "Upper", "Price": 9, "StockID": 2})
    assert stock == Stock(stock_id=2, name="Upper", price=9)


def test_unknown_keys_and_nulls_are_ignored():
    stock = Stock.from_dict({"name": None, "colour": "red", "company": "Co"})
    assert stock == Stock(company="Co")


@pytest.mark.parametrize(
    "data",
    [
        {"price": "12"},
        {"price": 1.5},
        {"price": True},
        {"name": 5},
        {"stockid": 2**63},
    ],
)
def test_wrong_types_raise(data):
    with pytest.raises(ValueError):
        Stock.from_dict(data)


def test_int64_bounds_are_accepted():
    stock = Stock.from_dict({"price": -(2**63), "stockid": 2**63 - 1})
    assert stock.price == -(2**63)
    assert stock.stock_id == 2**63 - 1