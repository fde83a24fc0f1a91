"""Tests for settings loading"""

import pytest
from pydantic import ValidationError

from ksuid_toolkit.config import KsuidSettings, load_settings
from ksuid_toolkit.formatting import OutputFormat


def test_defaults() -> None:
    settings = load_settings({})
    assert settings == KsuidSettings()
    assert settings.default_count == 1
    assert settings.default_format is OutputFormat.STRING
    assert settings.timezone is None
    assert settings.log_level == "WARNING"
    assert settings.json_logs is False


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "KSUID_COUNT": "4",
            "KSUID_FORMAT": "inspect",
            "KSUID_TIMEZONE": "Europe/Budapest",
            "KSUID_LOG_LEVEL": "debug",
        }
    )
    assert settings.default_count == 4
    assert settings.default_format is OutputFormat.INSPECT
    assert settings.timezone == "Europe/Budapest"
    assert settings.log_level == "DEBUG"


def test_production_enables_json_logs() -> None:
    assert load_settings({"ENVIRONMENT": "Production"}).json_logs is True


def test_empty_timezone_means_local() -> None:
    assert load_settings({"KSUID_TIMEZONE": ""}).timezone is None


@pytest.mark.parametrize(
    "env",
    [
        {"KSUID_COUNT": "abc"},
        {"KSUID_COUNT": "0"},
        {"KSUID_FORMAT": "yaml"},
        {"KSUID_TIMEZONE": "Mars/Olympus_Mons"},
        {"KSUID_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_values_rejected(env: dict[str, str]) -> None:
    with pytest.raises(ValidationError):
        load_settings(env)
