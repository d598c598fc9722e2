"""HTTP client for the dashboard backend, built on ``requests``."""

from __future__ import annotations

import logging
from typing import Any

import certifi
import requests

from inkdash.clients.base import BaseDashboardClient
from inkdash.errors import DashboardErrorCode, FetchError

logger = logging.getLogger(__name__)


class HttpDashboardClient(BaseDashboardClient):
    """Fetch dashboard payloads from the JSON backend.

    Endpoints: ``/stocks``, ``/hackernews``, ``/weather``, ``/holdings``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        session: Any | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.verify = certifi.where()
        self.session = session

    def fetch_quotes(self, tickers: list[str]) -> Any:
        return self._get("/stocks", params={"tickers": ",".join(tickers)})

    def fetch_news(self) -> Any:
        return self._get("/hackernews")

    def fetch_weather(self) -> Any:
        return self._get("/weather")

    def fetch_holdings(self) -> Any:
        return self._get("/holdings")

    def close(self) -> None:
        close = getattr(self.session, "close", None)
        if close is not None:
            close()

    # ------------------------------------------------------------ internal

    def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as exc:
            raise FetchError(
                f"GET {path} timed out after {self.timeout}s",
                code=DashboardErrorCode.TIMEOUT,
                retryable=True,
            ) from exc
        except requests.RequestException as exc:
            raise FetchError(
                f"GET {path} failed: {exc}",
                code=DashboardErrorCode.NETWORK,
                retryable=True,
            ) from exc

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"GET {path} returned HTTP {response.status_code}",
                code=DashboardErrorCode.BAD_STATUS,
                retryable=True,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(
                f"GET {path} returned a non-JSON body",
                code=DashboardErrorCode.MALFORMED_PAYLOAD,
            ) from exc
        logger.debug("GET %s -> %s", path, response.status_code)
        return payload
