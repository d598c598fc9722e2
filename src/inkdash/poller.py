"""Poller — one independently scheduled refresh cycle per source."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from inkdash.clients.base import BaseDashboardClient
from inkdash.config import DashboardConfig, Source
from inkdash.errors import DashboardError
from inkdash.parsing import parse_holdings, parse_news, parse_quotes, parse_weather
from inkdash.store import SnapshotStore

logger = logging.getLogger(__name__)


@dataclass
class _Job:
    """Schedule and counters for one source."""

    source: Source
    cadence: float
    fetch: Callable[[], Any]
    parse: Callable[[Any], Any]
    lock: threading.Lock = field(default_factory=threading.Lock)
    stats_lock: threading.Lock = field(default_factory=threading.Lock)
    next_due: float | None = None
    runs: int = 0
    successes: int = 0
    failures: int = 0
    skipped: int = 0
    missed: int = 0
    last_error: str | None = None
    last_success_at: float | None = None


class Poller:
    """Owns the four refresh cycles: fetch -> parse -> replace snapshot.

    Each source fires immediately, then every ``CADENCES[source]`` seconds.
    A failed cycle logs and leaves the snapshot untouched; the next tick is
    the only retry. A tick that arrives while the same source is still
    fetching is skipped, not queued, and ticks missed during a slow fetch are
    not backfilled.

    Usage::

        with Poller(client, store, config):
            ...  # threads poll until the block exits

    For simulated time, skip ``start()`` and call ``run_pending(now)``.
    """

    def __init__(
        self,
        client: BaseDashboardClient,
        store: SnapshotStore,
        config: DashboardConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.client = client
        self.store = store
        self.config = config or DashboardConfig()
        self._clock = clock
        self._stop_event = threading.Event()
        # Held across the stop check and the store write, and by stop(), so
        # nothing is written once stop has been requested.
        self._write_lock = threading.Lock()
        self._threads: list[threading.Thread] = []

        tickers = list(self.config.tickers)
        self._jobs: dict[Source, _Job] = {
            Source.QUOTES: _Job(
                Source.QUOTES,
                self.config.cadence(Source.QUOTES),
                fetch=lambda: self.client.fetch_quotes(tickers),
                parse=parse_quotes,
            ),
            Source.NEWS: _Job(
                Source.NEWS,
                self.config.cadence(Source.NEWS),
                fetch=self.client.fetch_news,
                parse=parse_news,
            ),
            Source.WEATHER: _Job(
                Source.WEATHER,
                self.config.cadence(Source.WEATHER),
                fetch=self.client.fetch_weather,
                parse=parse_weather,
            ),
            Source.HOLDINGS: _Job(
                Source.HOLDINGS,
                self.config.cadence(Source.HOLDINGS),
                fetch=self.client.fetch_holdings,
                parse=parse_holdings,
            ),
        }

    # ------------------------------------------------------------ lifecycle

    @property
    def running(self) -> bool:
        return any(t.is_alive() for t in self._threads)

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def start(self) -> None:
        """Launch one polling thread per source.

        Raises ``RuntimeError`` while threads from a previous run are still
        finishing a fetch; stop() may return before they do.
        """
        if self._threads and not self._stop_event.is_set():
            return
        lingering = [t.name for t in self._threads if t.is_alive()]
        if lingering:
            raise RuntimeError(f"poller threads still finishing: {', '.join(lingering)}")
        self._stop_event.clear()
        for job in self._jobs.values():
            job.next_due = None
        self._threads = [
            threading.Thread(
                target=self._loop,
                args=(job,),
                daemon=True,
                name=f"inkdash-poll-{job.source.value}",
            )
            for job in self._jobs.values()
        ]
        for thread in self._threads:
            thread.start()
        logger.info("poller started: %s", ", ".join(s.value for s in self._jobs))

    def stop(self, timeout: float = 1.0) -> None:
        with self._write_lock:
            self._stop_event.set()
        for thread in self._threads:
            if thread.is_alive():
                thread.join(timeout=timeout)
        # Threads blocked in a fetch stay tracked until they exit.
        self._threads = [t for t in self._threads if t.is_alive()]
        if self._threads:
            logger.warning(
                "poller stopped with %d thread(s) still in a fetch", len(self._threads)
            )
        else:
            logger.info("poller stopped")

    def __enter__(self) -> Poller:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # ------------------------------------------------------------- polling

    def poll_once(self, source: Source) -> bool:
        """Run one cycle for ``source`` now.

        Returns True when the snapshot was replaced. Returns False on
        failure, when the previous cycle is still in flight, or after stop.
        """
        job = self._jobs[source]
        if not job.lock.acquire(blocking=False):
            with job.stats_lock:
                job.skipped += 1
            logger.info("%s: previous fetch still running, tick skipped", source.value)
            return False
        try:
            return self._run_cycle(job)
        finally:
            job.lock.release()

    def run_pending(self, now: float | None = None) -> list[Source]:
        """Fire every source whose next tick is due at ``now``.

        Sources run one after another on the calling thread. Returns the
        sources that ticked.
        """
        ref = self._clock() if now is None else now
        fired: list[Source] = []
        for job in self._jobs.values():
            if self._is_due(job, ref):
                self._tick(job, ref, finished_at=ref if now is not None else None)
                fired.append(job.source)
        return fired

    def next_due(self, source: Source) -> float | None:
        return self._jobs[source].next_due

    def metrics(self) -> dict[str, dict[str, Any]]:
        return {
            job.source.value: {
                "cadence": job.cadence,
                "runs": job.runs,
                "successes": job.successes,
                "failures": job.failures,
                "skipped": job.skipped,
                "missed": job.missed,
                "last_error": job.last_error,
                "last_success_at": job.last_success_at,
                "next_due": job.next_due,
            }
            for job in self._jobs.values()
        }

    # ------------------------------------------------------------ internal

    @staticmethod
    def _is_due(job: _Job, now: float) -> bool:
        return job.next_due is None or job.next_due <= now

    def _loop(self, job: _Job) -> None:
        while not self._stop_event.is_set():
            now = self._clock()
            if self._is_due(job, now):
                self._tick(job, now)
                continue
            self._stop_event.wait(job.next_due - now)  # type: ignore[operator]

    def _tick(self, job: _Job, now: float, finished_at: float | None = None) -> None:
        scheduled = job.next_due if job.next_due is not None else now
        self.poll_once(job.source)
        done = self._clock() if finished_at is None else finished_at
        upcoming = scheduled + job.cadence
        while upcoming <= done:
            upcoming += job.cadence
            job.missed += 1
        job.next_due = upcoming

    def _run_cycle(self, job: _Job) -> bool:
        if self._stop_event.is_set():
            return False
        job.runs += 1
        source = job.source.value
        try:
            value = job.parse(job.fetch())
        except DashboardError as exc:
            job.failures += 1
            job.last_error = f"{exc.code.value}: {exc}"
            logger.warning(
                "%s: refresh failed (%s, %s), keeping last snapshot",
                source,
                job.last_error,
                "retryable" if exc.retryable else "not retryable",
            )
            return False
        except Exception as exc:
            job.failures += 1
            job.last_error = f"unexpected: {exc}"
            logger.exception("%s: unexpected error during refresh", source)
            return False

        with self._write_lock:
            if self._stop_event.is_set():
                logger.debug("%s: stop requested, discarding fetched payload", source)
                return False
            fetched_at = self._clock()
            self.store.set(job.source, value, fetched_at=fetched_at)
        job.successes += 1
        job.last_error = None
        job.last_success_at = fetched_at
        logger.debug("%s: snapshot replaced", source)
        return True
