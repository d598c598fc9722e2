"""Snapshot variants: what the dashboard currently knows about a source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Absent:
    """No successful fetch yet."""


@dataclass(frozen=True)
class Known(Generic[T]):
    """Last successfully fetched value.

    Attributes:
        value: Parsed payload for the source.
        fetched_at: Unix time the value was stored.
    """

    value: T
    fetched_at: float


SourceSnapshot = Union[Absent, Known]

ABSENT = Absent()
