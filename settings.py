from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from models.temperature import TemperatureUnit


_DEFAULT_UNIT_ENV = "CONVERTER_DEFAULT_UNIT"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    default_unit: TemperatureUnit
    log_level: str


def _read_default_unit(default: TemperatureUnit) -> TemperatureUnit:
    value = os.getenv(_DEFAULT_UNIT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        return TemperatureUnit.parse(candidate)
    except ValueError:
        return default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        default_unit=_read_default_unit(TemperatureUnit.celsius),
        log_level=_read_log_level("INFO"),
    )
