import json
from pathlib import Path
from typing import Type, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_and_validate(data_path: Path, model: Type[ModelT]) -> ModelT:
    """
    Load a JSON document from data_path and validate it against model.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Settings file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)


def format_money(x: float) -> str:
    """Format an amount with two decimals and thin thousand separators."""
    return f"{x:,.2f} $".replace(",", " ")
