"""Temperature conversion and thermal band classification."""

from __future__ import annotations

import logging
import math
import sys
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from models.temperature import (
    BandPresentation,
    ConversionResult,
    ScaleReference,
    TemperatureUnit,
    ThermalBand,
)

logger = logging.getLogger(__name__)

ABSOLUTE_ZERO_OFFSET = 273.15

_HUNDREDTH = Decimal("0.01")

# Lower bounds in Celsius; a value belongs to the last band whose bound it reaches.
_BAND_THRESHOLDS = (
    (35.0, ThermalBand.hot),
    (20.0, ThermalBand.warm),
    (0.0, ThermalBand.cool),
)

_PRESENTATION = {
    ThermalBand.freezing: BandPresentation(color="blue", icon="snowflake"),
    ThermalBand.cool: BandPresentation(color="cyan", icon="thermometer"),
    ThermalBand.warm: BandPresentation(color="orange", icon="sun"),
    ThermalBand.hot: BandPresentation(color="red", icon="flame"),
}

SCALE_REFERENCES = (
    ScaleReference(
        unit=TemperatureUnit.celsius,
        facts=("Water freezes at 0°C", "Water boils at 100°C"),
    ),
    ScaleReference(
        unit=TemperatureUnit.fahrenheit,
        facts=("Water freezes at 32°F", "Water boils at 212°F"),
    ),
    ScaleReference(
        unit=TemperatureUnit.kelvin,
        facts=("Absolute zero at 0K", "Water freezes at 273.15K"),
    ),
)


def round2(value: float) -> float:
    """Round to two decimal places, halves away from zero.

    The float is quantized from its shortest decimal representation, so
    ``round2(2.675) == 2.68`` even though the binary value is slightly below.
    Negative zero comes back as ``0.0``; non-finite input is returned as is.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # integer digits plus the two decimals must fit in the context precision
        ctx.prec = max(ctx.prec, exact.adjusted() + 4)
        quantized = exact.quantize(_HUNDREDTH, rounding=ROUND_HALF_UP)
    return float(quantized) + 0.0


def format_temperature(value: float) -> str:
    """Render a rounded value without trailing zeros (``37.0`` -> ``"37"``)."""
    rounded = round2(value)
    if abs(rounded) >= 1e15:
        return repr(rounded)
    text = f"{rounded:.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _saturate(value: float) -> float:
    if math.isinf(value):
        return math.copysign(sys.float_info.max, value)
    return value


def to_celsius(value: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.fahrenheit:
        celsius = (value - 32) * 5 / 9
        if math.isinf(celsius) and math.isfinite(value):
            # (F - 32) * 5 overflows near the float limit; dividing first does not
            celsius = (value - 32) / 9 * 5
        return celsius
    if unit is TemperatureUnit.kelvin:
        return value - ABSOLUTE_ZERO_OFFSET
    return value


def convert(value: float, from_unit: TemperatureUnit) -> ConversionResult:
    """Express ``value`` on every scale.

    Values below absolute zero are converted like any other number. A derived
    value beyond the float range saturates at ``±sys.float_info.max``.
    """
    celsius = to_celsius(value, from_unit)
    fahrenheit = celsius * 9 / 5 + 32
    if math.isinf(fahrenheit) and math.isfinite(celsius):
        fahrenheit = _saturate(celsius / 5 * 9 + 32)
    kelvin = _saturate(celsius + ABSOLUTE_ZERO_OFFSET)
    result = ConversionResult(
        celsius=round2(celsius),
        fahrenheit=round2(fahrenheit),
        kelvin=round2(kelvin),
    )
    logger.debug(
        "Converted temperature",
        extra={"value": value, "unit": from_unit.value},
    )
    return result


def classify(value: float, unit: TemperatureUnit) -> ThermalBand:
    celsius = to_celsius(value, unit)
    for lower_bound, band in _BAND_THRESHOLDS:
        if celsius >= lower_bound:
            return band
    return ThermalBand.freezing


def band_for(result: ConversionResult) -> ThermalBand:
    """Classify a result by its Celsius field so every card shares one band."""
    return classify(result.celsius, TemperatureUnit.celsius)


def presentation(band: ThermalBand) -> BandPresentation:
    return _PRESENTATION[band]


def parse_temperature(text: Optional[str]) -> Optional[float]:
    """Return the finite number in ``text``, or ``None`` when there is nothing to convert."""
    if text is None:
        return None
    candidate = text.strip()
    if not candidate:
        return None
    try:
        value = float(candidate)
    except ValueError:
        logger.debug("Ignoring non-numeric input", extra={"input_text": candidate})
        return None
    if not math.isfinite(value):
        logger.debug("Ignoring non-finite input", extra={"input_text": candidate})
        return None
    return value
