import argparse

from ruhungry.config import configure_logging, load_settings
from ruhungry.core.day import simulate_day
from ruhungry.core.restaurant import Restaurant
from ruhungry.ui.report import print_day_report, print_journal, print_menu, print_stock


def run(argv=None):
    parser = argparse.ArgumentParser(description="Run RUHungry for one trading day")
    parser.add_argument("--settings", help="JSON settings file")
    parser.add_argument("--orders", type=int, default=60, help="Customer orders")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)

    settings = load_settings(args.settings)
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    restaurant = Restaurant.from_settings(settings)
    print_menu(restaurant)

    report = simulate_day(restaurant, n_orders=args.orders, seed=args.seed)

    print_stock(restaurant)
    print_journal(restaurant)
    print_day_report(report)


if __name__ == "__main__":
    run()
