"""HTTP route definitions for the service."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.schemas import BandResponse, ConversionResponse, ScaleReferenceResponse
from models.temperature import TemperatureUnit
from services.converter import SCALE_REFERENCES, classify, convert
from settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_finite(value: float, unit: TemperatureUnit) -> None:
    if math.isfinite(value):
        return
    logger.warning(
        "Rejected non-finite temperature",
        extra={"value": value, "unit": unit.value, "reason": "non-finite"},
    )
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Temperature value must be a finite number.",
    )


@router.get(
    "/convert",
    response_model=ConversionResponse,
    summary="Convert a temperature to Celsius, Fahrenheit and Kelvin.",
)
async def convert_temperature(
    value: float = Query(..., description="Temperature to convert."),
    unit: Optional[TemperatureUnit] = Query(
        None, description="Unit of the value (defaults to the configured unit)."
    ),
) -> ConversionResponse:
    source = unit or get_settings().default_unit
    _require_finite(value, source)
    return ConversionResponse.from_result(convert(value, source))


@router.get(
    "/classify",
    response_model=BandResponse,
    summary="Classify a temperature into its thermal band.",
)
async def classify_temperature(
    value: float = Query(..., description="Temperature to classify."),
    unit: Optional[TemperatureUnit] = Query(None),
) -> BandResponse:
    source = unit or get_settings().default_unit
    _require_finite(value, source)
    return BandResponse.from_band(classify(value, source))


@router.get(
    "/references",
    response_model=List[ScaleReferenceResponse],
    summary="Reference points (freezing, boiling, absolute zero) per scale.",
)
async def scale_references() -> List[ScaleReferenceResponse]:
    return [ScaleReferenceResponse.from_reference(reference) for reference in SCALE_REFERENCES]


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "Open /ui for the converter page."}
