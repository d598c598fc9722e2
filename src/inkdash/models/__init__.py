"""Dashboard data models."""

from inkdash.models.holdings import HoldingKind, HoldingLine, Holdings
from inkdash.models.news import NewsItem
from inkdash.models.quote import Quote, QuoteEntry, QuoteError
from inkdash.models.snapshot import ABSENT, Absent, Known, SourceSnapshot
from inkdash.models.weather import ForecastDay, WeatherReport

__all__ = [
    "Quote",
    "QuoteError",
    "QuoteEntry",
    "NewsItem",
    "ForecastDay",
    "WeatherReport",
    "HoldingKind",
    "HoldingLine",
    "Holdings",
    "Absent",
    "Known",
    "SourceSnapshot",
    "ABSENT",
]
