"""Console output for RUHungry: menu, stockroom, journal and day report."""
