"""Mock client for testing and offline runs. No backend required."""

from __future__ import annotations

import copy
import time
from typing import Any

from inkdash.clients.base import BaseDashboardClient
from inkdash.config import Source
from inkdash.errors import DashboardErrorCode, FetchError


class MockClient(BaseDashboardClient):
    """In-memory client that returns configurable static payloads.

    Use ``set_quotes``, ``set_news``, etc. to pre-load payloads, or leave
    defaults for built-in sample data. ``fail(source)`` makes the next calls
    for that source raise ``FetchError`` until ``recover(source)``.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.calls: dict[Source, int] = {source: 0 for source in Source}
        self.requested_tickers: list[list[str]] = []
        self._failures: dict[Source, str] = {}
        self._quotes: dict[str, Any] | None = None
        self._news: Any = None
        self._weather: Any = None
        self._holdings: Any = None

    # --- Pre-load helpers ---

    def set_quotes(self, payload: Any) -> None:
        self._quotes = payload

    def set_news(self, payload: Any) -> None:
        self._news = payload

    def set_weather(self, payload: Any) -> None:
        self._weather = payload

    def set_holdings(self, payload: Any) -> None:
        self._holdings = payload

    def fail(self, source: Source, message: str = "connection refused") -> None:
        self._failures[source] = message

    def recover(self, source: Source) -> None:
        self._failures.pop(source, None)

    # --- Client implementation ---

    def fetch_quotes(self, tickers: list[str]) -> Any:
        self._enter(Source.QUOTES)
        self.requested_tickers.append(list(tickers))
        if self._quotes is not None:
            return copy.deepcopy(self._quotes)
        return {ticker: self._sample_quote(ticker) for ticker in tickers}

    def fetch_news(self) -> Any:
        self._enter(Source.NEWS)
        if self._news is not None:
            return copy.deepcopy(self._news)
        now = int(time.time())
        return [
            {
                "title": "Show HN: An e-ink dashboard for the hallway",
                "url": "https://example.com/eink",
                "score": 312,
                "by": "pg",
                "time": now - 2 * 3600,
                "comments_count": 87,
            },
            {
                "title": "Ask HN: What do you poll every five minutes?",
                "url": None,
                "score": 45,
                "by": "dang",
                "time": now - 25 * 60,
                "comments_count": 12,
            },
        ]

    def fetch_weather(self) -> Any:
        self._enter(Source.WEATHER)
        if self._weather is not None:
            return copy.deepcopy(self._weather)
        return {
            "forecast": [
                {
                    "date": "2024-01-15",
                    "current_temp": 7.5,
                    "min_temp": 3,
                    "max_temp": 9,
                    "status": "Clouds",
                    "description": "overcast clouds",
                    "timestamp": "2024-01-15T12:00:00",
                },
                {
                    "date": "2024-01-16",
                    "current_temp": 6,
                    "min_temp": 2,
                    "max_temp": 8,
                    "status": "Rain",
                    "description": "light rain",
                    "timestamp": "2024-01-16T12:00:00",
                },
            ],
            "sunrise": "08:39",
            "sunset": "17:22",
        }

    def fetch_holdings(self) -> Any:
        self._enter(Source.HOLDINGS)
        if self._holdings is not None:
            return copy.deepcopy(self._holdings)
        return {
            "stocks": [
                {"ticker": "Cash", "value": 2500.0, "type": "cash", "percentage": 10},
                {"ticker": "CW8.PA", "value": 20000.0, "type": "stock", "percentage": 80},
                {"ticker": "DDOG", "value": 2500.0, "type": "stock", "percentage": 10},
                {"ticker": "Total", "value": 25000.0, "type": "total", "percentage": 100},
            ],
            "total_value_gross": 25000.0,
            "total_value_approximation": 24100.0,
        }

    # --- internal ---

    def _enter(self, source: Source) -> None:
        self.calls[source] += 1
        if self.delay:
            time.sleep(self.delay)
        message = self._failures.get(source)
        if message is not None:
            raise FetchError(message, code=DashboardErrorCode.NETWORK, retryable=True)

    @staticmethod
    def _sample_quote(ticker: str) -> dict[str, Any]:
        return {
            "current_price": 150.0,
            "delta_percentage": 0.5,
            "day_low": 148.5,
            "day_high": 151.25,
            "currency": "USD" if "." not in ticker and "=" not in ticker else "EUR",
        }
