from __future__ import annotations

import logging

from cli.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, load_config
from logging_config import ContextualFormatter
from models.temperature import TemperatureUnit
from settings import get_settings


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("CONVERTER_DEFAULT_UNIT", "K")
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.default_unit is TemperatureUnit.kelvin
        assert settings.log_level == "DEBUG"
    finally:
        get_settings.cache_clear()


def test_invalid_default_unit_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("CONVERTER_DEFAULT_UNIT", "rankine")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.default_unit is TemperatureUnit.celsius
        assert settings.log_level == "INFO"
    finally:
        get_settings.cache_clear()


def test_cli_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://example.test/")
    monkeypatch.setenv("CLI_REQUEST_TIMEOUT", "2.5")

    config = load_config()

    assert config.base_url == "http://example.test"
    assert config.timeout == 2.5


def test_cli_config_ignores_invalid_timeout(monkeypatch) -> None:
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.setenv("CLI_REQUEST_TIMEOUT", "-1")

    config = load_config()

    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == DEFAULT_TIMEOUT


def test_contextual_formatter_appends_known_extras() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")
    record = logging.makeLogRecord(
        {"msg": "Converted temperature", "value": 1.5, "unit": "celsius", "ignored": "x"}
    )

    assert formatter.format(record) == "Converted temperature | value=1.5 unit=celsius"


def test_contextual_formatter_quotes_input_text() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")
    record = logging.makeLogRecord({"msg": "Ignoring", "input_text": "abc"})

    assert formatter.format(record) == "Ignoring | input_text='abc'"
