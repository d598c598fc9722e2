"""inkdash: stale-tolerant multi-source status dashboard for e-ink panels.

Polls market quotes, a news feed, a weather forecast and a portfolio
valuation on independent cadences, keeps the last good value of each, and
renders the exact on-screen text.

Quick start::

    from inkdash import create_dashboard_from_env
    with create_dashboard_from_env() as dash:
        dash.wait()
"""

from __future__ import annotations

import os

from inkdash.config import CADENCES, ClientType, DashboardConfig, Source
from inkdash.dashboard import Dashboard
from inkdash.display import DisplayLoop, Sink, stdout_sink
from inkdash.errors import DashboardError, DashboardErrorCode, FetchError, ParseError
from inkdash.models.holdings import HoldingKind, HoldingLine, Holdings
from inkdash.models.news import NewsItem
from inkdash.models.quote import Quote, QuoteError
from inkdash.models.snapshot import Absent, Known
from inkdash.models.weather import ForecastDay, WeatherReport
from inkdash.poller import Poller
from inkdash.renderer import DashboardView, render, render_text
from inkdash.store import SnapshotStore, StoreView

__version__ = "0.1.0"

__all__ = [
    # Wiring
    "Dashboard",
    "create_dashboard_from_env",
    "config_from_env",
    # Core
    "Poller",
    "SnapshotStore",
    "StoreView",
    "DisplayLoop",
    "render",
    "render_text",
    "DashboardView",
    # Config
    "DashboardConfig",
    "ClientType",
    "Source",
    "CADENCES",
    # Errors
    "DashboardError",
    "DashboardErrorCode",
    "FetchError",
    "ParseError",
    # Models
    "Quote",
    "QuoteError",
    "NewsItem",
    "ForecastDay",
    "WeatherReport",
    "HoldingKind",
    "HoldingLine",
    "Holdings",
    "Absent",
    "Known",
]


def config_from_env() -> DashboardConfig:
    """Read a ``DashboardConfig`` from environment variables.

    Environment variables:
        INKDASH_CLIENT: Fetch client, "http" or "mock" (default: "http").
        INKDASH_API_BASE_URL: Backend base URL (default: "http://localhost:8000").
        INKDASH_TICKERS: Comma-separated tickers (default: CW8.PA,WPEA.PA,DDOG,^GSPC,USDEUR=X).
        INKDASH_CITY: City label next to the weather strip (default: "Paris").
        INKDASH_LOCALE: Number locale for portfolio values (default: "fr-FR").
        INKDASH_REQUEST_TIMEOUT: HTTP timeout in seconds (default: 10).
        INKDASH_DISPLAY_TICK_SECONDS: Unconditional redraw interval (default: 60).
        INKDASH_LOG_LEVEL: Log level name (default: "INFO").
    """
    defaults = DashboardConfig()
    raw_tickers = os.getenv("INKDASH_TICKERS", "")
    tickers = [t.strip() for t in raw_tickers.split(",") if t.strip()] or defaults.tickers

    return DashboardConfig(
        client=ClientType(os.getenv("INKDASH_CLIENT", "http").strip().lower()),
        api_base_url=os.getenv("INKDASH_API_BASE_URL", defaults.api_base_url),
        tickers=tickers,
        city=os.getenv("INKDASH_CITY", defaults.city),
        locale=os.getenv("INKDASH_LOCALE", defaults.locale),
        request_timeout=float(os.getenv("INKDASH_REQUEST_TIMEOUT", str(defaults.request_timeout))),
        display_tick_seconds=int(
            os.getenv("INKDASH_DISPLAY_TICK_SECONDS", str(defaults.display_tick_seconds))
        ),
        log_level=os.getenv("INKDASH_LOG_LEVEL", defaults.log_level).upper(),
    )


def create_dashboard_from_env(sink: Sink = stdout_sink) -> Dashboard:
    """Zero-config factory: wires a ``Dashboard`` from ``config_from_env()``."""
    return Dashboard(config_from_env(), sink=sink)
