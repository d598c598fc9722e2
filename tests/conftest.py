"""Shared fixtures for inkdash tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from inkdash.clients.mock import MockClient
from inkdash.config import DashboardConfig
from inkdash.store import SnapshotStore

NOW = 1_700_000_000


class FakeClock:
    """Manually advanced clock, callable like ``time.time``."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(0.0)


@pytest.fixture
def mock_client() -> MockClient:
    return MockClient()


@pytest.fixture
def store(clock) -> SnapshotStore:
    return SnapshotStore(clock=clock)


@pytest.fixture
def config() -> DashboardConfig:
    return DashboardConfig(tickers=["CW8.PA", "DDOG", "^GSPC"])


@pytest.fixture
def quotes_payload() -> dict[str, Any]:
    return {
        "CW8.PA": {
            "current_price": 512.3,
            "delta_percentage": -0.42,
            "day_low": 509.1,
            "day_high": 515.0,
            "currency": "EUR",
        },
        "DDOG": {
            "current_price": 123.4,
            "delta_percentage": 1.2,
            "day_low": 120.0,
            "day_high": 125.5,
            "currency": "USD",
        },
        "^GSPC": {"error": "No data found, symbol may be delisted"},
    }


@pytest.fixture
def news_payload() -> list[dict[str, Any]]:
    return [
        {
            "title": "Show HN: An e-ink dashboard",
            "url": "https://example.com/eink",
            "score": 312,
            "by": "pg",
            "time": NOW - 2 * 3600,
            "comments_count": 87,
        },
        {
            "title": "Ask HN: Favourite refresh interval?",
            "score": 45,
            "by": "dang",
            "time": NOW - 25 * 60,
            "comments_count": 12,
        },
    ]


@pytest.fixture
def weather_payload() -> dict[str, Any]:
    return {
        "forecast": [
            {
                "date": "2024-01-15",
                "current_temp": 7.5,
                "min_temp": 3,
                "max_temp": 9,
                "status": "Thunderstorm",
                "description": "thunderstorm with rain",
                "timestamp": "2024-01-15T12:00:00",
            },
            {
                "date": "2024-01-16",
                "current_temp": 6,
                "min_temp": 2,
                "max_temp": 8,
                "status": "Haze",
                "description": "haze",
                "timestamp": "2024-01-16T12:00:00",
            },
        ],
        "sunrise": "08:39",
        "sunset": "17:22",
    }


@pytest.fixture
def holdings_payload() -> dict[str, Any]:
    return {
        "stocks": [
            {"ticker": "Cash", "value": 1000.0, "type": "cash", "percentage": 7},
            {"ticker": "DDOG", "value": 12345.6, "type": "stock", "percentage": 8},
            {"ticker": "Total", "value": 12345.6, "type": "total", "percentage": 100},
        ],
        "total_value_gross": 13345.6,
        "total_value_approximation": 13000.0,
    }


@pytest.fixture
def loaded_client(
    mock_client, quotes_payload, news_payload, weather_payload, holdings_payload
) -> MockClient:
    mock_client.set_quotes(quotes_payload)
    mock_client.set_news(news_payload)
    mock_client.set_weather(weather_payload)
    mock_client.set_holdings(holdings_payload)
    return mock_client
