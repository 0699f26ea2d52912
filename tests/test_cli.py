"""Integration tests for the skycast CLI.

The HTTP layer is replaced by a recorder so no test touches the network.
"""

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from conftest import load_payload
from skycast import cli
from skycast.cli import app
from skycast.client.http import fetch_body

runner = CliRunner()


class FakeFetch:
    """Stands in for fetch_body: records URLs and returns a canned body."""

    def __init__(self, body: bytes = b""):
        self.body = body
        self.urls = []

    def __call__(self, url: str) -> bytes:
        self.urls.append(url)
        return self.body


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setenv("API_KEY", "k3y")
    monkeypatch.setenv("CITY", "Lisbon")
    monkeypatch.setenv("UNITS", "metric")


def _install(monkeypatch, fake: FakeFetch) -> FakeFetch:
    monkeypatch.setattr(cli, "fetch_body", fake)
    return fake


class TestSuccess:
    """cod == 200 renders the summary and exits 0."""

    def test_clear_metric(self, monkeypatch, configured):
        fake = _install(monkeypatch, FakeFetch(load_payload("clear.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        for text in (
            "Weather: clear",
            "Temperature: 20",
            "Min/Max: 18/22",
            "Wind speed: 3 m/s",
            "Humidity: 55%",
        ):
            assert text in result.stdout
        assert "\x1b[1;33m" in result.stdout
        assert fake.urls == [
            "https://api.openweathermap.org/data/2.5/weather?q=Lisbon&units=metric&APPID=k3y"
        ]

    def test_rain_imperial(self, monkeypatch, configured):
        monkeypatch.setenv("UNITS", "imperial")
        _install(monkeypatch, FakeFetch(load_payload("rain.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Weather: rain" in result.stdout
        assert "Wind speed: 6 mph" in result.stdout
        assert "ʻ‚ʻ‚ʻ‚ʻ‚ʻ" in result.stdout

    def test_thunderstorm(self, monkeypatch, configured):
        _install(monkeypatch, FakeFetch(load_payload("thunderstorm.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Weather: storm" in result.stdout
        assert "Temperature: 15" in result.stdout
        assert "Humidity: 88%" in result.stdout

    def test_full_payload(self, monkeypatch, configured):
        _install(monkeypatch, FakeFetch(load_payload("lisbon_full.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Weather: clouds" in result.stdout
        assert "Temperature: 18" in result.stdout
        assert "Min/Max: 16/19" in result.stdout

    def test_config_json(self, monkeypatch, isolated_env: Path):
        (isolated_env / "config.json").write_text(
            json.dumps({"apiKey": "file-key", "city": "São Paulo", "units": "imperial"})
        )
        fake = _install(monkeypatch, FakeFetch(load_payload("clear.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Wind speed: 3 mph" in result.stdout
        assert "q=S%C3%A3o%20Paulo&units=imperial&APPID=file-key" in fake.urls[0]


class TestUpstreamErrors:
    """Non-200 cod values print a message on stdout and exit 1."""

    def test_city_not_found(self, monkeypatch, configured):
        _install(monkeypatch, FakeFetch(load_payload("not_found.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "City not found" in result.stdout
        assert "Weather:" not in result.stdout

    def test_invalid_api_key(self, monkeypatch, configured):
        _install(monkeypatch, FakeFetch(load_payload("unauthorized.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Invalid API key" in result.stdout

    def test_other_code(self, monkeypatch, configured):
        _install(monkeypatch, FakeFetch(b'{"cod":500}'))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "ERROR" in result.stdout


class TestFatalErrors:
    """Configuration, transport and decode failures exit 1."""

    def test_empty_city_makes_no_request(self, monkeypatch, configured):
        monkeypatch.setenv("CITY", "")
        fake = _install(monkeypatch, FakeFetch(load_payload("clear.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert fake.urls == []
        assert "API_KEY, CITY, and UNITS" in result.output

    def test_nothing_configured(self, monkeypatch):
        fake = _install(monkeypatch, FakeFetch(load_payload("clear.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert fake.urls == []

    def test_broken_config_json(self, monkeypatch, isolated_env: Path):
        (isolated_env / "config.json").write_text("{")
        fake = _install(monkeypatch, FakeFetch(load_payload("clear.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert fake.urls == []
        assert "config.json" in result.output

    def test_transport_error(self, monkeypatch, configured):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

        monkeypatch.setattr(
            cli,
            "fetch_body",
            lambda url: fetch_body(url, transport=httpx.MockTransport(handler)),
        )
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert not isinstance(result.exception, httpx.HTTPError)
        assert "Request to the weather API failed" in result.output
        assert "[Errno -2] Name or service not known" in result.output

    def test_non_finite_temperature(self, monkeypatch, configured):
        _install(monkeypatch, FakeFetch(b'{"cod":200,"main":{"temp":NaN}}'))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Could not decode weather response" in result.output
        assert "Weather:" not in result.output

    def test_config_json_not_utf8(self, monkeypatch, isolated_env: Path):
        (isolated_env / "config.json").write_bytes(
            b'{"apiKey":"k","city":"\xff\xfe","units":"metric"}'
        )
        fake = _install(monkeypatch, FakeFetch(load_payload("clear.json")))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert fake.urls == []
        assert "Error: Could not read" in result.output

    def test_decode_error(self, monkeypatch, configured):
        _install(monkeypatch, FakeFetch(b"<html>502 Bad Gateway</html>"))
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Could not decode weather response" in result.output
        assert "Weather:" not in result.output

    def test_rejects_arguments(self, configured):
        result = runner.invoke(app, ["Lisbon"])
        assert result.exit_code != 0
