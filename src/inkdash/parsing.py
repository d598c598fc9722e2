"""Payload validation: raw backend JSON to dashboard models.

Every ``parse_*`` function either returns fully-built models or raises
``ParseError``; nothing partially parsed escapes. Quotes are the exception:
each ticker is parsed on its own and a bad entry becomes a ``QuoteError``
for that ticker only.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from inkdash.errors import ParseError
from inkdash.models.holdings import HoldingKind, HoldingLine, Holdings
from inkdash.models.news import NewsItem
from inkdash.models.quote import Quote, QuoteEntry, QuoteError
from inkdash.models.weather import ForecastDay, WeatherReport

_QUOTE_FIELDS = ("current_price", "delta_percentage", "day_low", "day_high", "currency")


def _require(row: Mapping[str, Any], key: str, context: str) -> Any:
    if key not in row or row[key] is None:
        raise ParseError(f"{context}: missing '{key}'")
    return row[key]


def _as_float(value: Any, key: str, context: str) -> float:
    if isinstance(value, bool):
        raise ParseError(f"{context}: '{key}' is not a number")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"{context}: '{key}' is not a number") from exc
    if not math.isfinite(number):
        raise ParseError(f"{context}: '{key}' is not finite")
    return number


def _as_count(value: Any, key: str, context: str) -> int:
    number = _as_float(value, key, context)
    if number < 0 or number != int(number):
        raise ParseError(f"{context}: '{key}' must be a non-negative integer")
    return int(number)


def _as_mapping(payload: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ParseError(f"{context}: expected an object, got {type(payload).__name__}")
    return payload


def _as_list(payload: Any, context: str) -> list[Any]:
    if not isinstance(payload, list):
        raise ParseError(f"{context}: expected a list, got {type(payload).__name__}")
    return payload


# ----------------------------------------------------------------- quotes


def parse_quote(ticker: str, entry: Any) -> QuoteEntry:
    """Parse one ticker's entry; never raises."""
    if not isinstance(entry, Mapping):
        return QuoteError(ticker=ticker, message="malformed quote entry")
    if "error" in entry:
        return QuoteError(ticker=ticker, message=str(entry["error"]))
    context = f"quote {ticker}"
    try:
        for key in _QUOTE_FIELDS:
            _require(entry, key, context)
        return Quote(
            ticker=ticker,
            current_price=_as_float(entry["current_price"], "current_price", context),
            delta_percentage=_as_float(entry["delta_percentage"], "delta_percentage", context),
            day_low=_as_float(entry["day_low"], "day_low", context),
            day_high=_as_float(entry["day_high"], "day_high", context),
            currency=str(entry["currency"]),
        )
    except ParseError as exc:
        return QuoteError(ticker=ticker, message=exc.message)


def parse_quotes(payload: Any) -> dict[str, QuoteEntry]:
    """Parse a ``{ticker: quote | {"error": ...}}`` batch.

    Entry order follows the payload. Raises ``ParseError`` only when the
    batch itself is not an object.
    """
    batch = _as_mapping(payload, "quotes")
    return {str(ticker): parse_quote(str(ticker), entry) for ticker, entry in batch.items()}


# ------------------------------------------------------------------- news


def parse_news_item(row: Any, index: int = 0) -> NewsItem:
    context = f"news[{index}]"
    item = _as_mapping(row, context)
    url = item.get("url")
    return NewsItem(
        title=str(_require(item, "title", context)),
        url=str(url) if url else None,
        score=_as_count(_require(item, "score", context), "score", context),
        author=str(_require(item, "by", context)),
        timestamp=int(_as_float(_require(item, "time", context), "time", context)),
        comments_count=_as_count(item.get("comments_count", 0), "comments_count", context),
    )


def parse_news(payload: Any) -> tuple[NewsItem, ...]:
    """Parse the ranked story list, preserving source order."""
    rows = _as_list(payload, "news")
    return tuple(parse_news_item(row, i) for i, row in enumerate(rows))


# ---------------------------------------------------------------- weather


def _as_date(value: Any, context: str) -> date:
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise ParseError(f"{context}: invalid date '{text}'") from exc


def parse_forecast_day(row: Any, index: int = 0) -> ForecastDay:
    context = f"forecast[{index}]"
    day = _as_mapping(row, context)
    return ForecastDay(
        date=_as_date(_require(day, "date", context), context),
        current_temp=_as_float(_require(day, "current_temp", context), "current_temp", context),
        min_temp=_as_float(_require(day, "min_temp", context), "min_temp", context),
        max_temp=_as_float(_require(day, "max_temp", context), "max_temp", context),
        status=str(_require(day, "status", context)),
        description=str(day.get("description") or ""),
        timestamp=str(day.get("timestamp") or ""),
    )


def parse_weather(payload: Any) -> WeatherReport:
    report = _as_mapping(payload, "weather")
    rows = _as_list(_require(report, "forecast", "weather"), "weather.forecast")
    return WeatherReport(
        forecast=tuple(parse_forecast_day(row, i) for i, row in enumerate(rows)),
        sunrise=str(_require(report, "sunrise", "weather")),
        sunset=str(_require(report, "sunset", "weather")),
    )


# --------------------------------------------------------------- holdings


def parse_holding_line(row: Any, index: int = 0) -> HoldingLine:
    context = f"holdings[{index}]"
    line = _as_mapping(row, context)
    raw_kind = str(_require(line, "type", context))
    try:
        kind = HoldingKind(raw_kind)
    except ValueError as exc:
        raise ParseError(f"{context}: unknown type '{raw_kind}'") from exc

    if kind is HoldingKind.TOTAL:
        percentage = 0.0
    else:
        percentage = _as_float(_require(line, "percentage", context), "percentage", context)

    return HoldingLine(
        ticker=str(_require(line, "ticker", context)),
        value=_as_float(_require(line, "value", context), "value", context),
        kind=kind,
        percentage=percentage,
    )


def parse_holdings(payload: Any) -> Holdings:
    data = _as_mapping(payload, "holdings")
    rows = _as_list(_require(data, "stocks", "holdings"), "holdings.stocks")
    return Holdings(
        lines=tuple(parse_holding_line(row, i) for i, row in enumerate(rows)),
        total_value_gross=_as_float(
            _require(data, "total_value_gross", "holdings"), "total_value_gross", "holdings"
        ),
        total_value_approximation=_as_float(
            _require(data, "total_value_approximation", "holdings"),
            "total_value_approximation",
            "holdings",
        ),
    )
