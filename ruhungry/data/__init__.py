# ruhungry/data/__init__.py
"""
Seed data: the bundled feeds and the readers that parse them.
Feed file names are chosen by `ruhungry.config.Settings`.
"""

from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent
