import pytest

from calculator_app.config import configure_logging, load_config
from calculator_app.errors import ConfigError


def test_defaults():
    config = load_config({})
    assert config.history_limit == 5
    assert config.precision == 12
    assert config.log_level == "WARNING"
    assert config.port == 5000


def test_environment_overrides():
    config = load_config(
        {
            "CALCULATOR_HISTORY_LIMIT": "10",
            "CALCULATOR_PRECISION": "6",
            "CALCULATOR_LOG_LEVEL": "debug",
            "CALCULATOR_PORT": "8080",
        }
    )
    assert config.history_limit == 10
    assert config.precision == 6
    assert config.log_level == "DEBUG"
    assert config.port == 8080


def test_invalid_settings():
    with pytest.raises(ConfigError):
        load_config({"CALCULATOR_HISTORY_LIMIT": "five"})
    with pytest.raises(ConfigError):
        load_config({"CALCULATOR_HISTORY_LIMIT": "0"})
    with pytest.raises(ConfigError):
        configure_logging("LOUD")
