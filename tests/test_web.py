from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def web_client() -> Iterator[TestClient]:
    with TestClient(create_app()) as client:
        yield client


def test_ui_without_input_shows_instructions(web_client: TestClient) -> None:
    response = web_client.get("/ui")

    assert response.status_code == 200
    assert "How to Use" in response.text
    assert "Conversion Results" not in response.text


@pytest.mark.parametrize("text", ["", "   ", "abc"])
def test_ui_with_unusable_input_shows_instructions(web_client: TestClient, text: str) -> None:
    response = web_client.get("/ui", params={"temperature": text, "unit": "celsius"})

    assert response.status_code == 200
    assert "How to Use" in response.text
    assert 'id="results"' not in response.text


def test_ui_renders_three_cards_and_references(web_client: TestClient) -> None:
    response = web_client.get("/ui", params={"temperature": "98.6", "unit": "fahrenheit"})

    assert response.status_code == 200
    body = response.text
    assert "Conversion Results" in body
    assert "How to Use" not in body
    assert '<div class="value">37°</div>' in body
    assert "98.6°" in body
    assert "310.15" in body
    assert body.count("band-red") == 3
    assert 'data-icon="flame"' in body
    assert "Water boils at 100°C" in body
    assert 'value="fahrenheit" checked' in body


def test_ui_unknown_unit_falls_back_to_default(web_client: TestClient) -> None:
    response = web_client.get("/ui", params={"temperature": "10", "unit": "rankine"})

    assert response.status_code == 200
    assert '<div class="value">50°</div>' in response.text
    assert "283.15" in response.text
    assert 'value="celsius" checked' in response.text


def test_ui_accepts_unit_symbols(web_client: TestClient) -> None:
    response = web_client.get("/ui", params={"temperature": "0", "unit": "k"})

    assert "-273.15°" in response.text
    assert "band-blue" in response.text


def test_ui_renders_huge_values(web_client: TestClient) -> None:
    response = web_client.get("/ui", params={"temperature": "1e30", "unit": "celsius"})

    assert response.status_code == 200
    assert '<div class="value">1e+30°</div>' in response.text


def test_ui_shows_zero_without_sign(web_client: TestClient) -> None:
    response = web_client.get("/ui", params={"temperature": "-0.001", "unit": "celsius"})

    assert '<div class="value">0°</div>' in response.text
    assert "-0°" not in response.text
