"""SnapshotStore — last known good value per source."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from inkdash.config import Source
from inkdash.models.snapshot import ABSENT, Known, SourceSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[Source], None]


@dataclass(frozen=True)
class StoreView:
    """Point-in-time copy of every source cell.

    Attributes:
        quotes: ``Known[dict[str, QuoteEntry]]`` or ``Absent``.
        news: ``Known[tuple[NewsItem, ...]]`` or ``Absent``.
        weather: ``Known[WeatherReport]`` or ``Absent``.
        holdings: ``Known[Holdings]`` or ``Absent``.
        version: Store version the view was taken at.
    """

    quotes: SourceSnapshot = ABSENT
    news: SourceSnapshot = ABSENT
    weather: SourceSnapshot = ABSENT
    holdings: SourceSnapshot = ABSENT
    version: int = 0


class SnapshotStore:
    """Thread-safe map from source to its latest snapshot.

    The poller is the only writer. Readers take a ``view()`` and never see a
    half-applied write. Listeners are notified after each write, outside the
    lock, so they may read the store again.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._cells: dict[Source, SourceSnapshot] = {source: ABSENT for source in Source}
        self._listeners: list[Listener] = []
        self._version = 0

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    def get(self, source: Source) -> SourceSnapshot:
        with self._lock:
            return self._cells[source]

    def set(self, source: Source, value: Any, fetched_at: float | None = None) -> Known:
        """Replace the snapshot for ``source`` wholesale."""
        snapshot = Known(value=value, fetched_at=self._clock() if fetched_at is None else fetched_at)
        with self._lock:
            self._cells[source] = snapshot
            self._version += 1
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(source)
            except Exception:
                logger.exception("snapshot listener failed for %s", source.value)
        return snapshot

    def view(self) -> StoreView:
        with self._lock:
            return StoreView(
                quotes=self._cells[Source.QUOTES],
                news=self._cells[Source.NEWS],
                weather=self._cells[Source.WEATHER],
                holdings=self._cells[Source.HOLDINGS],
                version=self._version,
            )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

