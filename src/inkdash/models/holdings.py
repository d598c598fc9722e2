"""Portfolio holdings data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HoldingKind(Enum):
    CASH = "cash"
    STOCK = "stock"
    TOTAL = "total"


@dataclass(frozen=True)
class HoldingLine:
    """One row of the portfolio valuation.

    Attributes:
        ticker: Ticker symbol, or a synthetic label for cash/total rows.
        value: Position value in euros.
        kind: Row kind.
        percentage: Share of the portfolio (0-100). Not shown for totals.
    """

    ticker: str
    value: float
    kind: HoldingKind
    percentage: float


@dataclass(frozen=True)
class Holdings:
    """Full portfolio valuation as served by the backend."""

    lines: tuple[HoldingLine, ...]
    total_value_gross: float
    total_value_approximation: float
