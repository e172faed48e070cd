"""Domain models shared across the converter, API and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TemperatureUnit(str, Enum):
    """Supported temperature scales."""

    celsius = "celsius"
    fahrenheit = "fahrenheit"
    kelvin = "kelvin"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, text: str) -> "TemperatureUnit":
        """Resolve a unit from its value, name or symbol (``c``, ``°F``, ``K``...)."""
        candidate = text.strip().lower().lstrip("°")
        for unit in cls:
            if candidate in {unit.value, unit.symbol.lower().lstrip("°"), unit.value[0]}:
                return unit
        raise ValueError(f"Unknown temperature unit: {text!r}")


_SYMBOLS = {
    TemperatureUnit.celsius: "°C",
    TemperatureUnit.fahrenheit: "°F",
    TemperatureUnit.kelvin: "K",
}


class ThermalBand(str, Enum):
    """Ordered thermal ranges used for presentation hints."""

    freezing = "freezing"
    cool = "cool"
    warm = "warm"
    hot = "hot"


@dataclass(frozen=True, slots=True)
class BandPresentation:
    color: str
    icon: str


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """One temperature expressed on all three scales, rounded to hundredths."""

    celsius: float
    fahrenheit: float
    kelvin: float

    def value_in(self, unit: TemperatureUnit) -> float:
        return getattr(self, unit.value)


@dataclass(frozen=True, slots=True)
class ScaleReference:
    """Well-known fixed points of a scale, shown next to results."""

    unit: TemperatureUnit
    facts: tuple[str, ...]
