"""On-screen text for every dashboard field.

Pure, total functions. No I/O and no clock reads: ``now`` is always passed
in. Output never depends on the process locale. Lookup tables are finite and
each has an explicit fallback.
"""

from __future__ import annotations

import math
from datetime import date

from inkdash.models.holdings import HoldingKind, HoldingLine
from inkdash.models.news import NewsItem
from inkdash.models.quote import Quote, QuoteEntry, QuoteError

USD_SYMBOL = "$"
EUR_SYMBOL = "€"

WEATHER_GLYPHS: dict[str, str] = {
    "Clear": "☀️",
    "Clouds": "☁️",
    "Rain": "🌧️",
    "Snow": "❄️",
    "Thunderstorm": "⛈️",
    "Drizzle": "🌦️",
    "Mist": "🌫️",
    "Fog": "🌫️",
}
DEFAULT_WEATHER_GLYPH = "🌡️"

SUNRISE_GLYPH = "☀️︎"
SUNSET_GLYPH = "🌑"

# locale -> (group separator, decimal separator)
NUMBER_FORMATS: dict[str, tuple[str, str]] = {
    "fr-FR": (" ", ","),
    "en-US": (",", "."),
    "de-DE": (".", ","),
}
DEFAULT_LOCALE = "fr-FR"

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_MINUTE = 60
_HOUR = 3600
_DAY = 86400


def plain_number(value: float) -> str:
    """Shortest text for a number: ``8.0`` -> "8", ``8.5`` -> "8.5"."""
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


# ----------------------------------------------------------------- quotes


def currency_symbol(currency: str) -> str:
    return USD_SYMBOL if currency == "USD" else EUR_SYMBOL


def price_line(entry: QuoteEntry) -> str:
    """``"DDOG: 123.45 $ (+1.20%)"`` or ``"DDOG: Error loading data"``."""
    if isinstance(entry, QuoteError):
        return f"{entry.ticker}: Error loading data"
    sign = "+" if entry.delta_percentage >= 0 else ""
    return (
        f"{entry.ticker}: {entry.current_price:.2f} {currency_symbol(entry.currency)} "
        f"({sign}{entry.delta_percentage:.2f}%)"
    )


def range_line(quote: Quote) -> str:
    return f"[{quote.day_low:.2f}, {quote.day_high:.2f}]"


# ------------------------------------------------------------------- news


def relative_time(timestamp: float, now: float) -> str:
    """Coarse age bucket: minutes under an hour, hours under a day, else days.

    Timestamps in the future clamp to "0m".
    """
    diff = max(int(now - timestamp), 0)
    if diff < _HOUR:
        return f"{diff // _MINUTE}m"
    if diff < _DAY:
        return f"{diff // _HOUR}h"
    return f"{diff // _DAY}d"


def news_line(item: NewsItem, now: float) -> str:
    return (
        f"{item.score}pts by {item.author} {relative_time(item.timestamp, now)} ago "
        f"• {item.comments_count} comments"
    )


# ---------------------------------------------------------------- weather


def weather_glyph(status: str) -> str:
    return WEATHER_GLYPHS.get(status, DEFAULT_WEATHER_GLYPH)


def temperature_label(temp: float) -> str:
    return f"{plain_number(temp)}°C"


def weekday_label(day: date) -> str:
    return _WEEKDAYS[day.weekday()]


def sunrise_label(sunrise: str) -> str:
    return f"{sunrise} {SUNRISE_GLYPH}"


def sunset_label(sunset: str) -> str:
    return f"{sunset} {SUNSET_GLYPH}"


# --------------------------------------------------------------- holdings


def normalize_locale(locale: str) -> str:
    candidate = locale.strip().replace("_", "-")
    for known in NUMBER_FORMATS:
        if known.lower() == candidate.lower():
            return known
    return DEFAULT_LOCALE


def format_amount(value: float, locale: str = DEFAULT_LOCALE) -> str:
    """Two-decimal amount with the locale's separators: ``12 345,60``."""
    group, decimal = NUMBER_FORMATS[normalize_locale(locale)]
    return f"{value:,.2f}".translate(str.maketrans({",": group, ".": decimal}))


def holding_value(line: HoldingLine, locale: str = DEFAULT_LOCALE) -> str:
    """``"12 345,60 € (8%)"``; totals carry no percentage."""
    text = f"{format_amount(line.value, locale)} {EUR_SYMBOL}"
    if line.kind is not HoldingKind.TOTAL:
        text += f" ({plain_number(line.percentage)}%)"
    return text


# ----------------------------------------------------------------- header


def date_header(day: date) -> str:
    return f"{_MONTHS[day.month - 1]} {day.day}, {day.year}"
