"""Abstract base class for dashboard fetch clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseDashboardClient(ABC):
    """Read-only access to the dashboard backend.

    Every method returns the decoded JSON payload untouched; shaping it into
    models is the poller's job. Implementations raise ``FetchError`` for
    transport failures, non-success statuses and undecodable bodies. One
    call per tick per source, no pagination or retries.
    """

    @abstractmethod
    def fetch_quotes(self, tickers: list[str]) -> Any:
        """Fetch ``{ticker: quote | {"error": msg}}`` for ``tickers``."""
        ...

    @abstractmethod
    def fetch_news(self) -> Any:
        """Fetch the ranked top-stories list."""
        ...

    @abstractmethod
    def fetch_weather(self) -> Any:
        """Fetch ``{forecast: [...], sunrise, sunset}``."""
        ...

    @abstractmethod
    def fetch_holdings(self) -> Any:
        """Fetch ``{stocks: [...], total_value_gross, total_value_approximation}``."""
        ...

    def close(self) -> None:
        """Release network resources."""
