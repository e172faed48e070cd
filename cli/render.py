from __future__ import annotations

from typing import Any, Dict, Iterable

import typer

from services.session import USAGE_STEPS

_COLORS = {
    "blue": typer.colors.BLUE,
    "cyan": typer.colors.CYAN,
    "orange": typer.colors.YELLOW,
    "red": typer.colors.RED,
}

_GLYPHS = {
    "snowflake": "*",
    "thermometer": "|",
    "sun": "o",
    "flame": "^",
}


def echo_heading(text: str, err: bool = False) -> None:
    typer.secho(text, bold=True, err=err)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_conversion(payload: Dict[str, Any]) -> None:
    echo_heading("Conversion Results")
    for card in payload.get("cards") or []:
        glyph = _GLYPHS.get(card.get("icon"), " ")
        typer.secho(
            f"  {glyph} {card.get('name')}: {card.get('display', card.get('value'))} {card.get('symbol')}",
            fg=_COLORS.get(card.get("color")),
        )
    typer.echo()
    echo_key_values([("band", payload.get("band"))])


def render_references(references: Iterable[Dict[str, Any]]) -> None:
    echo_heading("Temperature Scale References")
    for reference in references:
        typer.echo(f"{reference.get('name')}:")
        for fact in reference.get("facts") or []:
            typer.echo(f"  - {fact}")


def render_usage(err: bool = False) -> None:
    echo_heading("How to Use", err=err)
    for number, step in enumerate(USAGE_STEPS, start=1):
        typer.echo(f"  {number}. {step}", err=err)
