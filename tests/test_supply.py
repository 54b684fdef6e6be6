import pytest

from ruhungry.core.accounting import TransactionRecord
from ruhungry.domain.errors import NotFoundError
from ruhungry.domain.types import TransactionKind
from tests.conftest import build_restaurant


@pytest.fixture
def pantry():
    return build_restaurant(
        [(1, "Sugar", 1.0, 100), (2, "Saffron", 12.0, 3)],
        [("Desserts", [("Candy", [1])])],
    )


def _earn(restaurant, amount):
    restaurant.transactions.append(
        TransactionRecord(TransactionKind.ORDER, "Candy", 1, amount, True)
    )


def _last(restaurant):
    return restaurant.transactions.records()[-1]


# -------- Donations --------


def test_donation_approved_above_threshold(pantry):
    _earn(pantry, 60.0)

    assert pantry.supply.donate("Sugar", 30)
    assert pantry.ledger.get("Sugar").stock_level == 70
    assert pantry.total_profit() == pytest.approx(60.0)
    record = _last(pantry)
    assert (record.kind, record.succeeded, record.profit) == (
        TransactionKind.DONATION,
        True,
        0.0,
    )


def test_donation_refused_at_threshold(pantry):
    _earn(pantry, 50.0)

    assert not pantry.supply.donate("Sugar", 30)
    assert pantry.ledger.get("Sugar").stock_level == 100
    assert not _last(pantry).succeeded


def test_donation_refused_without_stock(pantry):
    _earn(pantry, 60.0)

    assert not pantry.supply.donate("Saffron", 4)
    assert pantry.ledger.get("Saffron").stock_level == 3
    assert _last(pantry).profit == 0.0


def test_donation_threshold_is_configurable(pantry):
    pantry.supply.donation_threshold = 5.0
    _earn(pantry, 6.0)
    assert pantry.supply.donate("sugar", 1)


# -------- Restocks --------


def test_restock_refused_when_profit_does_not_cover_cost(pantry):
    _earn(pantry, 10.0)

    assert not pantry.supply.restock("Sugar", 50)
    assert pantry.ledger.get("Sugar").stock_level == 100
    assert pantry.total_profit() == pytest.approx(10.0)
    record = _last(pantry)
    assert (record.kind, record.succeeded, record.profit) == (
        TransactionKind.RESTOCK,
        False,
        0.0,
    )


def test_restock_approved_costs_profit(pantry):
    _earn(pantry, 60.0)

    assert pantry.supply.restock("Sugar", 50)
    assert pantry.ledger.get("Sugar").stock_level == 150
    assert pantry.total_profit() == pytest.approx(10.0)
    assert _last(pantry).profit == pytest.approx(-50.0)


def test_restock_needs_strictly_more_profit_than_cost(pantry):
    _earn(pantry, 36.0)
    assert not pantry.supply.restock("Saffron", 3)
    _earn(pantry, 0.5)
    assert pantry.supply.restock("Saffron", 3)


def test_restocks_draw_down_profit(pantry):
    _earn(pantry, 25.0)
    assert pantry.supply.restock("Saffron", 1)
    assert pantry.supply.restock("Saffron", 1)
    # 1.0 left, not enough for a third
    assert not pantry.supply.restock("Saffron", 1)
    assert pantry.total_profit() == pytest.approx(1.0)


# -------- Errors --------


def test_unknown_ingredient(pantry):
    with pytest.raises(NotFoundError):
        pantry.supply.donate("Truffle", 1)
    with pytest.raises(NotFoundError):
        pantry.supply.restock("Truffle", 1)
    assert len(pantry.transactions) == 0


def test_non_positive_quantity(pantry):
    with pytest.raises(ValueError):
        pantry.supply.donate("Sugar", 0)
    with pytest.raises(ValueError):
        pantry.supply.restock("Sugar", -1)
