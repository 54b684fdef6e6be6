import json

import pytest
from pydantic import ValidationError

from ruhungry.config import Settings, load_settings
from ruhungry.data import DATA_DIR


def test_defaults(monkeypatch):
    monkeypatch.delenv("RUHUNGRY_LOG_LEVEL", raising=False)
    settings = load_settings()

    assert settings.markup == 1.2
    assert settings.donation_threshold == 50.0
    assert settings.stock_path == DATA_DIR / "stock.in"
    assert settings.log_level == "INFO"


def test_settings_file(tmp_path, monkeypatch):
    monkeypatch.delenv("RUHUNGRY_LOG_LEVEL", raising=False)
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"markup": 1.5, "data_dir": str(tmp_path), "log_level": "debug"}),
        encoding="utf-8",
    )
    settings = load_settings(path)

    assert settings.markup == 1.5
    assert settings.menu_path == tmp_path / "menu.in"
    assert settings.log_level == "DEBUG"


def test_env_overrides_log_level(monkeypatch):
    monkeypatch.setenv("RUHUNGRY_LOG_LEVEL", "warning")
    assert load_settings().log_level == "WARNING"


def test_missing_settings_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.json")


@pytest.mark.parametrize("payload", [{"markup": 0}, {"log_level": "LOUD"}])
def test_invalid_settings(payload):
    with pytest.raises(ValidationError):
        Settings(**payload)

