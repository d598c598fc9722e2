"""Tests for MockClient and the client registry."""

import pytest

from inkdash.clients import create_client
from inkdash.clients.http import HttpDashboardClient
from inkdash.clients.mock import MockClient
from inkdash.config import ClientType, Source
from inkdash.errors import FetchError
from inkdash.parsing import parse_holdings, parse_news, parse_quotes, parse_weather


class TestMockClient:
    def test_sample_data_parses(self, mock_client):
        quotes = parse_quotes(mock_client.fetch_quotes(["CW8.PA", "DDOG"]))
        assert quotes["CW8.PA"].currency == "EUR"
        assert quotes["DDOG"].currency == "USD"
        assert len(parse_news(mock_client.fetch_news())) == 2
        assert len(parse_weather(mock_client.fetch_weather()).forecast) == 2
        assert parse_holdings(mock_client.fetch_holdings()).lines[-1].ticker == "Total"

    def test_counts_calls(self, mock_client):
        mock_client.fetch_news()
        mock_client.fetch_news()
        assert mock_client.calls[Source.NEWS] == 2
        assert mock_client.calls[Source.QUOTES] == 0

    def test_preloaded_payload_is_copied(self, mock_client, holdings_payload):
        mock_client.set_holdings(holdings_payload)
        payload = mock_client.fetch_holdings()
        payload["stocks"].clear()
        assert len(mock_client.fetch_holdings()["stocks"]) == 3

    def test_fail_and_recover(self, mock_client):
        mock_client.fail(Source.WEATHER, "backend down")
        with pytest.raises(FetchError, match="backend down") as exc_info:
            mock_client.fetch_weather()
        assert exc_info.value.retryable
        mock_client.recover(Source.WEATHER)
        assert "forecast" in mock_client.fetch_weather()


class TestRegistry:
    def test_create_mock(self):
        assert isinstance(create_client(ClientType.MOCK), MockClient)

    def test_create_http_forwards_kwargs(self):
        client = create_client(ClientType.HTTP, base_url="http://example.test/", timeout=2.5)
        assert isinstance(client, HttpDashboardClient)
        assert client.base_url == "http://example.test"
        assert client.timeout == 2.5
        client.close()

    def test_create_from_string(self):
        assert isinstance(create_client("mock", delay=0.0), MockClient)

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="expected one of: http, mock"):
            create_client("grpc")
