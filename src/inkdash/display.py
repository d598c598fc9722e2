"""Display loop pushing a fresh frame on snapshot change or display tick."""

from __future__ import annotations

import logging
import sys
import threading
import time
from collections.abc import Callable

from inkdash.config import DashboardConfig, Source
from inkdash.renderer import render, render_text
from inkdash.store import SnapshotStore

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]


def stdout_sink(frame: str) -> None:
    sys.stdout.write(frame)
    sys.stdout.flush()


class DisplayLoop:
    """Re-render whenever the store changes, and at least every display tick.

    Frames identical to the last one sent are not pushed again; e-ink panels
    flash on every full refresh.
    """

    def __init__(
        self,
        store: SnapshotStore,
        sink: Sink,
        config: DashboardConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.sink = sink
        self.config = config or DashboardConfig()
        self._clock = clock
        self._wake = threading.Event()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._last_frame: str | None = None
        self.frames_sent = 0

    def refresh(self, force: bool = False) -> bool:
        """Render now; returns True when a frame was sent to the sink."""
        dashboard = render(
            self.store.view(),
            self._clock(),
            city=self.config.city,
            locale=self.config.locale,
        )
        frame = render_text(dashboard)
        if frame == self._last_frame and not force:
            return False
        self.sink(frame)
        self._last_frame = frame
        self.frames_sent += 1
        return True

    def _on_change(self, source: Source) -> None:
        logger.debug("display: %s changed", source.value)
        self._wake.set()

    def _loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.refresh()
            except Exception:
                logger.exception("display refresh failed")
            self._wake.wait(self.config.display_tick_seconds)
            self._wake.clear()

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._unsubscribe = self.store.subscribe(self._on_change)
        self._thread = threading.Thread(target=self._loop, daemon=True, name="inkdash-display")
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._stop_event.set()
        self._wake.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=timeout)
        self._thread = None
