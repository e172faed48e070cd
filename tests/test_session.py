from __future__ import annotations

from models.temperature import ConversionResult, TemperatureUnit, ThermalBand
from services.session import ConverterSession


def test_new_session_has_no_result() -> None:
    session = ConverterSession()

    assert session.has_result is False
    assert session.result is None
    assert session.band is None


def test_fahrenheit_body_temperature_end_to_end() -> None:
    session = ConverterSession(unit=TemperatureUnit.fahrenheit)

    session.set_text("98.6")

    assert session.result == ConversionResult(celsius=37.0, fahrenheit=98.6, kelvin=310.15)
    assert session.band is ThermalBand.hot


def test_empty_and_non_numeric_text_clear_the_result() -> None:
    session = ConverterSession(text="10")
    assert session.has_result

    session.set_text("")
    assert session.result is None

    session.set_text("10")
    session.set_text("abc")
    assert session.result is None
    assert session.band is None


def test_changing_unit_replaces_the_result() -> None:
    session = ConverterSession(text="25")
    first = session.result

    session.set_unit(TemperatureUnit.fahrenheit)

    assert session.result is not first
    assert session.result is not None
    assert session.result.celsius == -3.89
    assert session.band is ThermalBand.freezing
    assert first is not None and first.celsius == 25.0


def test_changing_unit_without_text_keeps_no_result() -> None:
    session = ConverterSession(text="   ")

    session.set_unit(TemperatureUnit.kelvin)

    assert session.unit is TemperatureUnit.kelvin
    assert session.has_result is False


def test_huge_input_still_produces_a_result() -> None:
    session = ConverterSession(text="1e30")

    assert session.result is not None
    assert session.result.celsius == 1e30
    assert session.band is ThermalBand.hot

    session.set_text("-1e300")
    assert session.result is not None
    assert session.band is ThermalBand.freezing
