"""Dashboard configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Source(Enum):
    """Independently polled data feeds."""

    QUOTES = "quotes"
    NEWS = "news"
    WEATHER = "weather"
    HOLDINGS = "holdings"


class ClientType(Enum):
    """Supported fetch client backends."""

    HTTP = "http"
    MOCK = "mock"


# Refresh interval per source, in seconds. Fixed at design time.
CADENCES: dict[Source, int] = {
    Source.QUOTES: 5 * 60,
    Source.NEWS: 15 * 60,
    Source.WEATHER: 30 * 60,
    Source.HOLDINGS: 5 * 60,
}

DEFAULT_TICKERS = ["CW8.PA", "WPEA.PA", "DDOG", "^GSPC", "USDEUR=X"]


@dataclass
class DashboardConfig:
    """Configuration for the poller, renderer and display loop.

    Attributes:
        client: Fetch client backend.
        api_base_url: Base URL of the dashboard backend.
        tickers: Quote tickers, in display order.
        city: Label shown next to the weather strip.
        locale: Number locale for portfolio values ("fr-FR" or "en-US").
        request_timeout: Per-request timeout handed to the HTTP client.
        display_tick_seconds: Interval of the unconditional display refresh.
        log_level: Root log level name.
    """

    client: ClientType = ClientType.HTTP
    api_base_url: str = "http://localhost:8000"
    tickers: list[str] = field(default_factory=lambda: list(DEFAULT_TICKERS))
    city: str = "Paris"
    locale: str = "fr-FR"
    request_timeout: float = 10.0
    display_tick_seconds: int = 60
    log_level: str = "INFO"

    def cadence(self, source: Source) -> int:
        return CADENCES[source]
