import pytest

from ruhungry.core.day import simulate_day
from ruhungry.core.restaurant import Restaurant
from ruhungry.domain.types import TransactionKind
from tests.conftest import build_restaurant


def test_day_report_is_consistent_with_the_journal():
    restaurant = Restaurant.from_settings()
    report = simulate_day(restaurant, n_orders=40, seed=7)

    assert report.orders_requested == 40
    assert report.orders_served + report.orders_lost == 40
    assert report.orders_served == restaurant.count_transactions(
        TransactionKind.ORDER, succeeded=True
    )
    assert report.donations_approved + report.donations_refused == 4
    assert report.restocks_approved + report.restocks_refused == 4
    assert report.total_profit == pytest.approx(restaurant.total_profit())
    assert report.median_dish_price > 0
    assert 0.0 <= report.service_rate <= 1.0


def test_same_seed_same_day():
    first = simulate_day(Restaurant.from_settings(), n_orders=30, seed=3)
    second = simulate_day(Restaurant.from_settings(), n_orders=30, seed=3)
    assert first == second


def test_starved_kitchen_loses_every_order():
    restaurant = build_restaurant([(1, "Flour", 2.0, 0)], [("Bakery", [("Bread", [1])])])
    report = simulate_day(restaurant, n_orders=10, seed=1, supply_every=0)

    assert report.orders_lost == 10
    assert report.served_by_dish == {}
    assert report.total_profit == 0.0
    assert report.service_rate == 0.0


def test_served_portions_are_tallied_by_dish():
    restaurant = build_restaurant([(1, "Flour", 2.0, 1000)], [("Bakery", [("Bread", [1])])])
    report = simulate_day(restaurant, n_orders=12, seed=5, max_quantity=1, supply_every=0)

    assert report.served_by_dish == {"Bread": 12}
    assert restaurant.stock("Flour").stock_level == 988


def test_invalid_arguments():
    restaurant = build_restaurant([(1, "Flour", 2.0, 10)], [("Bakery", [("Bread", [1])])])
    with pytest.raises(ValueError):
        simulate_day(restaurant, n_orders=-1)
    with pytest.raises(ValueError):
        simulate_day(restaurant, max_quantity=0)
