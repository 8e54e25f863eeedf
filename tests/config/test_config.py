from decimal import ROUND_DOWN, ROUND_HALF_EVEN
from unittest.mock import patch

import pytest

from config.config import BasketConfig


def test_basket_config_defaults():
    """Test BasketConfig initializes with correct default values."""
    config = BasketConfig()
    assert config.decimal_scale == 4
    assert config.display_places == 2
    assert config.display_rounding == ROUND_DOWN
    assert config.log_level == "INFO"


def test_basket_config_custom():
    """Test BasketConfig initialization with custom values."""
    config = BasketConfig(decimal_scale=6, display_rounding=ROUND_HALF_EVEN)
    assert config.decimal_scale == 6
    assert config.display_rounding == ROUND_HALF_EVEN
    # Check a default value is still correct
    assert config.display_places == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"decimal_scale": -1},
        {"display_places": -2},
        {"display_rounding": "ROUND_SIDEWAYS"},
    ],
)
def test_basket_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        BasketConfig(**kwargs)


@patch("config.config.load_project_dotenv")
def test_from_env_reads_basket_variables(mock_load_dotenv, monkeypatch):
    monkeypatch.setenv("BASKET_DECIMAL_SCALE", "6")
    monkeypatch.setenv("BASKET_DISPLAY_PLACES", "3")
    monkeypatch.setenv("BASKET_DISPLAY_ROUNDING", "round_half_up")
    monkeypatch.setenv("BASKET_LOG_LEVEL", "debug")

    config = BasketConfig.from_env()

    mock_load_dotenv.assert_called_once()
    assert config.decimal_scale == 6
    assert config.display_places == 3
    assert config.display_rounding == "ROUND_HALF_UP"
    assert config.log_level == "DEBUG"


@patch("config.config.load_project_dotenv")
def test_from_env_falls_back_to_defaults(mock_load_dotenv, monkeypatch):
    for name in ("DECIMAL_SCALE", "DISPLAY_PLACES", "DISPLAY_ROUNDING", "LOG_LEVEL"):
        monkeypatch.delenv(f"BASKET_{name}", raising=False)
    monkeypatch.setenv("BASKET_DISPLAY_PLACES", "  ")

    assert BasketConfig.from_env() == BasketConfig()


@patch("config.config.load_project_dotenv")
def test_from_env_rejects_non_integer_scale(mock_load_dotenv, monkeypatch):
    monkeypatch.setenv("BASKET_DECIMAL_SCALE", "four")
    with pytest.raises(ValueError, match="BASKET_DECIMAL_SCALE"):
        BasketConfig.from_env()
