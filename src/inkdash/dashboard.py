"""Dashboard wiring of client, store, poller and display loop."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from inkdash.clients import create_client
from inkdash.clients.base import BaseDashboardClient
from inkdash.config import ClientType, DashboardConfig
from inkdash.display import DisplayLoop, Sink
from inkdash.poller import Poller
from inkdash.renderer import DashboardView, render
from inkdash.store import SnapshotStore

logger = logging.getLogger(__name__)


class Dashboard:
    """Central owner of the running dashboard.

    Usage::

        from inkdash import create_dashboard_from_env
        with create_dashboard_from_env() as dash:
            dash.wait()
    """

    def __init__(
        self,
        config: DashboardConfig,
        sink: Sink,
        client: BaseDashboardClient | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self._clock = clock
        if client is None:
            kwargs: dict[str, object] = {}
            if config.client is ClientType.HTTP:
                kwargs["base_url"] = config.api_base_url
                kwargs["timeout"] = config.request_timeout
            client = create_client(config.client, **kwargs)
        self.client = client
        self.store = SnapshotStore(clock=clock)
        self.poller = Poller(client, self.store, config, clock=clock)
        self.display = DisplayLoop(self.store, sink, config, clock=clock)

    def start(self) -> None:
        logger.info(
            "dashboard starting: backend=%s tickers=%s",
            self.config.api_base_url if self.config.client is ClientType.HTTP else "mock",
            ",".join(self.config.tickers),
        )
        self.display.start()
        self.poller.start()

    def stop(self) -> None:
        self.poller.stop()
        self.display.stop()
        self.client.close()
        logger.info("dashboard stopped")

    def wait(self, poll_seconds: float = 0.5) -> None:
        """Block until interrupted."""
        while True:
            time.sleep(poll_seconds)

    def refresh_all(self) -> None:
        """Poll every source once, synchronously, then push one frame."""
        self.poller.run_pending()
        self.display.refresh(force=True)

    def snapshot_view(self) -> DashboardView:
        return render(
            self.store.view(),
            self._clock(),
            city=self.config.city,
            locale=self.config.locale,
        )

    def __enter__(self) -> Dashboard:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
