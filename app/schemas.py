"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from models.temperature import (
    ConversionResult,
    ScaleReference,
    TemperatureUnit,
    ThermalBand,
)
from services.converter import band_for, format_temperature, presentation


class BandResponse(BaseModel):
    """Thermal band of a value together with its presentation tokens."""

    band: ThermalBand
    color: str = Field(..., description="Color token used by the renderer.")
    icon: str = Field(..., description="Icon token used by the renderer.")

    @classmethod
    def from_band(cls, band: ThermalBand) -> "BandResponse":
        style = presentation(band)
        return cls(band=band, color=style.color, icon=style.icon)


class ResultCard(BaseModel):
    """One labeled value of a conversion, annotated with its band styling."""

    unit: TemperatureUnit
    name: str
    symbol: str
    value: float
    display: str = Field(..., description="Value formatted for display, without trailing zeros.")
    color: str
    icon: str


class ConversionResponse(BaseModel):
    """A temperature expressed on all three scales."""

    celsius: float
    fahrenheit: float
    kelvin: float
    band: ThermalBand
    cards: List[ResultCard] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionResponse":
        return cls(
            celsius=result.celsius,
            fahrenheit=result.fahrenheit,
            kelvin=result.kelvin,
            band=band_for(result),
            cards=build_cards(result),
        )


class ScaleReferenceResponse(BaseModel):
    unit: TemperatureUnit
    name: str
    facts: List[str]

    @classmethod
    def from_reference(cls, reference: ScaleReference) -> "ScaleReferenceResponse":
        return cls(
            unit=reference.unit,
            name=reference.unit.display_name,
            facts=list(reference.facts),
        )


def build_cards(result: ConversionResult) -> List[ResultCard]:
    style = presentation(band_for(result))
    cards: List[ResultCard] = []
    for unit in TemperatureUnit:
        cards.append(
            ResultCard(
                unit=unit,
                name=unit.display_name,
                symbol=unit.symbol,
                value=result.value_in(unit),
                display=format_temperature(result.value_in(unit)),
                color=style.color,
                icon=style.icon,
            )
        )
    return cards
