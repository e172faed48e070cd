"""Caller-side converter state that recomputes on every change."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from models.temperature import ConversionResult, TemperatureUnit, ThermalBand
from services.converter import band_for, convert, parse_temperature

USAGE_STEPS = (
    "Enter a temperature value in the input field",
    "Select the original unit of measurement (°C, °F, or K)",
    "View the instant conversion to all three temperature scales",
)


@dataclass
class ConverterSession:
    """Holds the raw input text and selected unit.

    ``result`` is replaced (never updated in place) whenever either field
    changes, and cleared when the text does not hold a finite number.
    """

    text: str = ""
    unit: TemperatureUnit = TemperatureUnit.celsius
    result: Optional[ConversionResult] = field(default=None, init=False)
    band: Optional[ThermalBand] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self._recompute()

    @property
    def has_result(self) -> bool:
        return self.result is not None

    def set_text(self, text: str) -> None:
        self.text = text
        self._recompute()

    def set_unit(self, unit: TemperatureUnit) -> None:
        self.unit = unit
        self._recompute()

    def _recompute(self) -> None:
        value = parse_temperature(self.text)
        if value is None:
            self.result = None
            self.band = None
            return
        self.result = convert(value, self.unit)
        self.band = band_for(self.result)
