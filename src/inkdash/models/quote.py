"""Quote data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Quote:
    """Latest market quote for one ticker.

    ``day_low <= current_price <= day_high`` is not guaranteed; the source
    may report values outside the range during volatile sessions.

    Attributes:
        ticker: Ticker symbol as requested.
        current_price: Last price.
        delta_percentage: Signed change from previous close, in percent.
        day_low: Session low.
        day_high: Session high.
        currency: ISO currency code reported by the source.
    """

    ticker: str
    current_price: float
    delta_percentage: float
    day_low: float
    day_high: float
    currency: str


@dataclass(frozen=True)
class QuoteError:
    """Per-ticker failure inside an otherwise successful quote batch."""

    ticker: str
    message: str


QuoteEntry = Union[Quote, QuoteError]
