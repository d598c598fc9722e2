"""Tests for configuration, the CLI and dashboard wiring."""

import argparse

import pytest

from inkdash import config_from_env
from inkdash.cli import apply_cli_overrides, build_parser, main
from inkdash.clients.http import HttpDashboardClient
from inkdash.clients.mock import MockClient
from inkdash.config import CADENCES, DEFAULT_TICKERS, ClientType, DashboardConfig, Source
from inkdash.dashboard import Dashboard

from conftest import NOW

_ENV_VARS = (
    "INKDASH_CLIENT",
    "INKDASH_API_BASE_URL",
    "INKDASH_TICKERS",
    "INKDASH_CITY",
    "INKDASH_LOCALE",
    "INKDASH_REQUEST_TIMEOUT",
    "INKDASH_DISPLAY_TICK_SECONDS",
    "INKDASH_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    def test_cadences(self):
        assert CADENCES == {
            Source.QUOTES: 300,
            Source.NEWS: 900,
            Source.WEATHER: 1800,
            Source.HOLDINGS: 300,
        }

    def test_config_defaults(self):
        config = DashboardConfig()
        assert config.client is ClientType.HTTP
        assert config.tickers == DEFAULT_TICKERS
        assert config.tickers is not DEFAULT_TICKERS
        assert config.cadence(Source.WEATHER) == 1800


class TestConfigFromEnv:
    def test_empty_env(self, clean_env):
        assert config_from_env() == DashboardConfig()

    def test_overrides(self, clean_env):
        clean_env.setenv("INKDASH_CLIENT", "MOCK")
        clean_env.setenv("INKDASH_TICKERS", " AAPL , ,MSFT")
        clean_env.setenv("INKDASH_CITY", "Lille")
        clean_env.setenv("INKDASH_REQUEST_TIMEOUT", "2.5")
        clean_env.setenv("INKDASH_DISPLAY_TICK_SECONDS", "30")
        clean_env.setenv("INKDASH_LOG_LEVEL", "debug")
        config = config_from_env()
        assert config.client is ClientType.MOCK
        assert config.tickers == ["AAPL", "MSFT"]
        assert config.city == "Lille"
        assert config.request_timeout == 2.5
        assert config.display_tick_seconds == 30
        assert config.log_level == "DEBUG"

    def test_unknown_client(self, clean_env):
        clean_env.setenv("INKDASH_CLIENT", "grpc")
        with pytest.raises(ValueError):
            config_from_env()


class TestCliOverrides:
    def _apply(self, *argv):
        return apply_cli_overrides(DashboardConfig(), build_parser().parse_args(list(argv)))

    def test_no_flags_is_identity(self):
        assert self._apply() == DashboardConfig()

    def test_flags(self):
        config = self._apply("--mock", "--tickers", "DDOG,^GSPC", "--city", "Brest", "--timeout", "4")
        assert config.client is ClientType.MOCK
        assert config.tickers == ["DDOG", "^GSPC"]
        assert config.city == "Brest"
        assert config.request_timeout == 4.0

    @pytest.mark.parametrize(
        "argv",
        [("--tickers", " , "), ("--timeout", "0"), ("--display-tick", "-5")],
    )
    def test_invalid(self, argv):
        with pytest.raises(ValueError):
            self._apply(*argv)

    def test_namespace_without_values(self):
        args = argparse.Namespace(
            base_url=None, tickers=None, city=None, locale=None, timeout=None,
            display_tick=None, mock=False, log_level=None,
        )
        assert apply_cli_overrides(DashboardConfig(), args) == DashboardConfig()


class TestMain:
    def test_once_with_mock_writes_frame(self, clean_env, tmp_path):
        output = tmp_path / "frame.txt"
        code = main(["--once", "--mock", "--tickers", "CW8.PA,DDOG", "--output", str(output)])
        assert code == 0
        frame = output.read_text(encoding="utf-8")
        assert "CW8.PA: 150.00 € (+0.50%)" in frame
        assert "DDOG: 150.00 $ (+0.50%)" in frame
        assert "== Portfolio Overview ==" in frame

    def test_once_to_stdout(self, clean_env, capsys):
        assert main(["--once", "--mock", "--city", "Rennes"]) == 0
        out = capsys.readouterr().out
        assert "Rennes" in out.splitlines()[0]

    def test_configuration_error(self, clean_env, capsys):
        assert main(["--timeout", "0"]) == 2
        assert "Configuration error" in capsys.readouterr().err


class TestDashboard:
    def test_builds_client_from_config(self):
        assert isinstance(Dashboard(DashboardConfig(client=ClientType.MOCK), print).client, MockClient)
        dashboard = Dashboard(DashboardConfig(api_base_url="http://backend:9000"), print)
        assert isinstance(dashboard.client, HttpDashboardClient)
        assert dashboard.client.base_url == "http://backend:9000"
        dashboard.client.close()

    def test_refresh_all(self, loaded_client, config):
        frames = []
        dashboard = Dashboard(config, frames.append, client=loaded_client, clock=lambda: NOW)
        dashboard.refresh_all()
        assert len(frames) == 1
        assert all(loaded_client.calls[s] == 1 for s in Source)
        view = dashboard.snapshot_view()
        assert view.market_watch[2].price_line == "^GSPC: Error loading data"
        assert view.portfolio[-1].value == "12 345,60 €"

    def test_start_stop(self, loaded_client, config):
        frames = []
        with Dashboard(config, frames.append, client=loaded_client) as dashboard:
            assert dashboard.poller.running
        assert not dashboard.poller.running
        assert dashboard.poller.stopped
