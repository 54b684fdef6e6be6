"""
Runtime settings.

Defaults live on the `Settings` model; a JSON file can override any of
them, and `RUHUNGRY_LOG_LEVEL` overrides the log level last.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from ruhungry.data import DATA_DIR
from ruhungry.utils import load_and_validate

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Engine and loader settings."""

    markup: float = Field(default=1.2, gt=0, description="Price = cost x markup")
    donation_threshold: float = Field(
        default=50.0, description="Profit a donation must exceed"
    )
    data_dir: Path = DATA_DIR
    stock_feed: str = "stock.in"
    menu_feed: str = "menu.in"
    tables_feed: str = "tables1.in"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @property
    def stock_path(self) -> Path:
        return self.data_dir / self.stock_feed

    @property
    def menu_path(self) -> Path:
        return self.data_dir / self.menu_feed

    @property
    def tables_path(self) -> Path:
        return self.data_dir / self.tables_feed


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Settings from `path` (JSON) if given, else defaults, then env overrides."""
    settings = load_and_validate(Path(path), Settings) if path else Settings()
    env_level = os.getenv("RUHUNGRY_LOG_LEVEL")
    if env_level:
        settings = Settings.model_validate(
            {**settings.model_dump(), "log_level": env_level}
        )
    return settings


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)
