from __future__ import annotations

from typing import Any, Dict, List

import httpx
import typer

from cli.config import CLIConfig
from models.temperature import TemperatureUnit


class ApiClient:
    """Minimal HTTP client for the converter service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def convert(self, value: float, unit: TemperatureUnit) -> Dict[str, Any]:
        response = self._get("/convert", params={"value": value, "unit": unit.value})
        payload = response.json()
        if not isinstance(payload, dict) or "celsius" not in payload:
            raise typer.BadParameter("Unexpected response payload when converting.")
        return payload

    def references(self) -> List[Dict[str, Any]]:
        return self._get("/references").json()

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> httpx.Response:
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.RequestError as exc:
            typer.secho(
                f"Could not reach {self._config.base_url}: {exc}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1) from exc
        return response

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: Any = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
