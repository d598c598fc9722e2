"""Project the current snapshots onto the four display regions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo

from inkdash import formatting
from inkdash.models.quote import Quote
from inkdash.models.snapshot import Known
from inkdash.store import StoreView

MARKET_WATCH_TITLE = "Market Watch"
NEWS_TITLE = "Top Hacker News posts"
PORTFOLIO_TITLE = "Portfolio Overview"


@dataclass(frozen=True)
class WeatherCell:
    weekday: str
    glyph: str
    temperature: str


@dataclass(frozen=True)
class HeaderRegion:
    """Date, city, sun times and the weather strip.

    ``sunrise``/``sunset`` are None until weather has been fetched once.
    """

    date: str
    city: str
    sunrise: str | None
    sunset: str | None
    weather: tuple[WeatherCell, ...]


@dataclass(frozen=True)
class QuoteRow:
    """Price line plus range line; ``range_line`` is None for errored tickers."""

    price_line: str
    range_line: str | None


@dataclass(frozen=True)
class NewsRow:
    title: str
    meta: str


@dataclass(frozen=True)
class HoldingRow:
    label: str
    value: str


@dataclass(frozen=True)
class DashboardView:
    header: HeaderRegion
    market_watch: tuple[QuoteRow, ...]
    news: tuple[NewsRow, ...]
    portfolio: tuple[HoldingRow, ...]


def render(
    view: StoreView,
    now: float,
    *,
    city: str = "Paris",
    locale: str = formatting.DEFAULT_LOCALE,
    tz: tzinfo | None = None,
) -> DashboardView:
    """Build the full dashboard from ``view`` as of ``now`` (unix seconds).

    Absent snapshots yield empty regions. Same inputs, same output.
    """
    today = datetime.fromtimestamp(now, tz=tz).date()
    return DashboardView(
        header=_header(view, formatting.date_header(today), city),
        market_watch=_market_watch(view),
        news=_news(view, now),
        portfolio=_portfolio(view, locale),
    )


def _header(view: StoreView, date_text: str, city: str) -> HeaderRegion:
    if not isinstance(view.weather, Known):
        return HeaderRegion(date=date_text, city=city, sunrise=None, sunset=None, weather=())
    report = view.weather.value
    cells = tuple(
        WeatherCell(
            weekday=formatting.weekday_label(day.date),
            glyph=formatting.weather_glyph(day.status),
            temperature=formatting.temperature_label(day.current_temp),
        )
        for day in report.forecast
    )
    return HeaderRegion(
        date=date_text,
        city=city,
        sunrise=formatting.sunrise_label(report.sunrise),
        sunset=formatting.sunset_label(report.sunset),
        weather=cells,
    )


def _market_watch(view: StoreView) -> tuple[QuoteRow, ...]:
    if not isinstance(view.quotes, Known):
        return ()
    rows: list[QuoteRow] = []
    for entry in view.quotes.value.values():
        if isinstance(entry, Quote):
            rows.append(QuoteRow(formatting.price_line(entry), formatting.range_line(entry)))
        else:
            rows.append(QuoteRow(formatting.price_line(entry), None))
    return tuple(rows)


def _news(view: StoreView, now: float) -> tuple[NewsRow, ...]:
    if not isinstance(view.news, Known):
        return ()
    return tuple(NewsRow(item.title, formatting.news_line(item, now)) for item in view.news.value)


def _portfolio(view: StoreView, locale: str) -> tuple[HoldingRow, ...]:
    if not isinstance(view.holdings, Known):
        return ()
    return tuple(
        HoldingRow(line.ticker, formatting.holding_value(line, locale))
        for line in view.holdings.value.lines
    )


# ------------------------------------------------------------------ text


def render_text(dashboard: DashboardView) -> str:
    """Plain-text frame of ``dashboard``, one region after another."""
    header = dashboard.header
    top = [header.date, header.city]
    if header.sunrise is not None and header.sunset is not None:
        top.append(f"{header.sunrise} / {header.sunset}")
    lines = ["  ".join(top)]
    if header.weather:
        lines.append(
            " | ".join(f"{c.weekday} {c.glyph} {c.temperature}" for c in header.weather)
        )

    lines.append(_title(MARKET_WATCH_TITLE))
    for row in dashboard.market_watch:
        lines.append(row.price_line)
        if row.range_line is not None:
            lines.append(f"  {row.range_line}")

    lines.append(_title(NEWS_TITLE))
    for news in dashboard.news:
        lines.append(news.title)
        lines.append(f"  {news.meta}")

    lines.append(_title(PORTFOLIO_TITLE))
    width = max((len(r.label) for r in dashboard.portfolio), default=0)
    for holding in dashboard.portfolio:
        lines.append(f"{holding.label.ljust(width)}  {holding.value}")

    return "\n".join(lines) + "\n"


def _title(text: str) -> str:
    return f"== {text} =="
