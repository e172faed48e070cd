from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import typer

from app.schemas import ConversionResponse, ScaleReferenceResponse
from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_conversion, render_references, render_usage
from models.temperature import ConversionResult, TemperatureUnit
from services.converter import SCALE_REFERENCES, convert, parse_temperature
from services.session import ConverterSession
from settings import get_settings


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Convert temperatures between Celsius, Fahrenheit and Kelvin.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_UNIT_HELP = "Unit of the value: celsius/c, fahrenheit/f or kelvin/k (defaults to CONVERTER_DEFAULT_UNIT)."


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _resolve_unit(raw: Optional[str]) -> TemperatureUnit:
    if raw is None:
        return get_settings().default_unit
    try:
        return TemperatureUnit.parse(raw)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--from'") from exc


def _require_value(text: str) -> float:
    value = parse_temperature(text)
    if value is None:
        typer.secho(f"Cannot convert {text!r}: enter a finite number.", fg=typer.colors.RED, err=True)
        render_usage(err=True)
        raise typer.Exit(code=1)
    return value


def _payload(result: ConversionResult) -> Dict[str, Any]:
    return ConversionResponse.from_result(result).model_dump(mode="json")


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Converter API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for API responses.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("convert")
def convert_command(
    text: str = typer.Argument(..., metavar="VALUE", help="Temperature to convert (use -- before negative values)."),
    unit: Optional[str] = typer.Option(None, "--from", "-f", help=_UNIT_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Convert a temperature locally."""
    source = _resolve_unit(unit)
    value = _require_value(text)
    payload = _payload(convert(value, source))
    if as_json:
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    render_conversion(payload)


@app.command("remote")
def remote_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., metavar="VALUE", help="Temperature to convert (use -- before negative values)."),
    unit: Optional[str] = typer.Option(None, "--from", "-f", help=_UNIT_HELP),
) -> None:
    """Convert a temperature through the HTTP service."""
    state = _get_state(ctx)
    source = _resolve_unit(unit)
    value = _require_value(text)
    payload = state.client.convert(value, source)
    render_conversion(payload)


@app.command("references")
def references_command(
    ctx: typer.Context,
    remote: bool = typer.Option(False, "--remote", help="Fetch the references from the HTTP service."),
) -> None:
    """Show freezing and boiling points on each scale."""
    if remote:
        references = _get_state(ctx).client.references()
    else:
        references = [
            ScaleReferenceResponse.from_reference(reference).model_dump(mode="json")
            for reference in SCALE_REFERENCES
        ]
    render_references(references)


@app.command("interactive")
def interactive_command(
    unit: Optional[str] = typer.Option(None, "--from", "-f", help=_UNIT_HELP),
) -> None:
    """Convert as you type: enter values, :c/:f/:k to switch unit, :q to quit."""
    session = ConverterSession(unit=_resolve_unit(unit))
    render_usage()
    while True:
        try:
            line = typer.prompt(f"[{session.unit.symbol}]", default="", show_default=False)
        except typer.Abort:
            break

        command = line.strip()
        if command in {":q", ":quit"}:
            break
        if command.startswith(":"):
            name = command[1:].strip()
            if name.startswith("unit "):
                name = name[len("unit "):]
            try:
                session.set_unit(TemperatureUnit.parse(name))
            except ValueError as exc:
                typer.secho(str(exc), fg=typer.colors.RED, err=True)
                continue
        else:
            session.set_text(line)

        if session.result is not None:
            render_conversion(_payload(session.result))
        else:
            render_usage()
