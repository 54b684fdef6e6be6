from typing import List

from ruhungry.core.day import DayReport
from ruhungry.core.restaurant import Restaurant
from ruhungry.ui.console_style import bold, fail, outcome
from ruhungry.utils import format_money


def _pct(a: float, b: float) -> str:
    """Format a / b as a percentage, "—" when b <= 0."""
    if b <= 0:
        return "—"
    percentage = max(0.0, min(100.0, a / b * 100.0))
    return f"{percentage:5.1f}%"


def _bar(current: int, maxv: int, width: int = 24, fill_char: str = "█") -> str:
    """Text progress bar of current / maxv over `width` characters."""
    if maxv <= 0:
        return " " * width
    ratio = max(0.0, min(1.0, float(current) / float(maxv)))
    n = int(round(ratio * width))
    return fill_char * n + " " * (width - n)


def print_menu(restaurant: Restaurant) -> None:
    print(bold("\n🍽  Menu"))
    print("=" * 56)
    summary = restaurant.price_summary()
    for category in restaurant.categories():
        stats = summary.get(category, {})
        print(
            f"{bold(category)}  ({int(stats.get('count', 0))} dishes,"
            f" median {format_money(stats.get('median', 0.0))})"
        )
        for dish in restaurant.dishes_by_category(category):
            print(
                f"  {dish.name:30} {format_money(dish.price):>10}  (+{format_money(dish.profit)})"
            )
    print("=" * 56)


def print_stock(restaurant: Restaurant, low_stock: int = 10) -> None:
    print(bold("\n📦 Stockroom"))
    print("=" * 56)
    print(f"{'Id':>5} {'Ingredient':24} {'Stock':>8} {'Unit cost':>12}")
    print("-" * 56)
    for name in restaurant.ingredient_names():
        item = restaurant.stock(name)
        level = f"{item.stock_level:>8d}"
        if item.stock_level < low_stock:
            level = fail(level)
        print(f"{item.id:>5} {item.name:24} {level} {format_money(item.unit_cost):>12}")
    print("=" * 56)


def print_journal(restaurant: Restaurant, last: int = 20) -> None:
    records = restaurant.transactions_log()
    print(bold(f"\n🧾 Journal ({len(records)} records, last {min(last, len(records))})"))
    print("-" * 56)
    for record in records[-last:] if last else []:
        line = (
            f"{record.kind.value:9} {record.subject:26} x{record.quantity:<3d}"
            f" {format_money(record.profit):>10}"
        )
        print(outcome(line, record.succeeded))
    print("-" * 56)


def print_day_report(report: DayReport, title: str = "📊 Trading day") -> None:
    print(f"\n{'─' * 60}")
    print(bold(title))
    print(f"{'─' * 60}")
    print(
        f"Orders requested : {report.orders_requested:>6d}   Served : {report.orders_served:>6d}"
    )
    print(
        f"Substituted      : {report.orders_substituted:>6d}   Lost   : {report.orders_lost:>6d}"
    )
    print(f"Service rate     : {_pct(report.orders_served, report.orders_requested):>6}")
    print(f"[{_bar(report.orders_served, report.orders_requested)}] Served")
    print(
        f"\nDonations        : {report.donations_approved} approved,"
        f" {report.donations_refused} refused"
    )
    print(
        f"Restocks         : {report.restocks_approved} approved,"
        f" {report.restocks_refused} refused"
    )
    print(f"\nMedian dish price: {format_money(report.median_dish_price):>12}")
    print(f"Profit of the day: {format_money(report.total_profit):>12}")
    if report.served_by_dish:
        print("\nBest sellers:")
        for name, portions in _top(report.served_by_dish):
            print(f"  - {name:30} {portions:>4d} portions")
    print(f"{'─' * 60}\n")


def _top(served_by_dish: dict, n: int = 5) -> List[tuple]:
    return sorted(served_by_dish.items(), key=lambda item: (-item[1], item[0]))[:n]
