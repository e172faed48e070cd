from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.schemas import ScaleReferenceResponse, build_cards
from models.temperature import TemperatureUnit
from services.converter import SCALE_REFERENCES
from services.session import USAGE_STEPS, ConverterSession
from settings import get_settings


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def _resolve_unit(raw: Optional[str]) -> TemperatureUnit:
    default = get_settings().default_unit
    if not raw:
        return default
    try:
        return TemperatureUnit.parse(raw)
    except ValueError:
        return default


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
async def ui_index(
    request: Request,
    temperature: str = Query(""),
    unit: Optional[str] = Query(None),
) -> HTMLResponse:
    session = ConverterSession(text=temperature, unit=_resolve_unit(unit))
    context = {
        "session": session,
        "units": list(TemperatureUnit),
        "cards": build_cards(session.result) if session.result else [],
        "references": [ScaleReferenceResponse.from_reference(ref) for ref in SCALE_REFERENCES],
        "usage_steps": USAGE_STEPS,
    }
    return templates.TemplateResponse(request, "ui/index.html", context)
