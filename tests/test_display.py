"""Tests for the display loop."""

import time

from inkdash.config import DashboardConfig, Source
from inkdash.display import DisplayLoop
from inkdash.parsing import parse_quotes

from conftest import NOW


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        time.sleep(0.01)
    return predicate()


class TestRefresh:
    def test_identical_frames_are_not_resent(self, store):
        frames = []
        display = DisplayLoop(store, frames.append, clock=lambda: NOW)
        assert display.refresh() is True
        assert display.refresh() is False
        assert len(frames) == 1

    def test_force_resends(self, store):
        frames = []
        display = DisplayLoop(store, frames.append, clock=lambda: NOW)
        display.refresh()
        assert display.refresh(force=True) is True
        assert frames[0] == frames[1]
        assert display.frames_sent == 2

    def test_store_change_changes_frame(self, store, quotes_payload):
        frames = []
        display = DisplayLoop(store, frames.append, clock=lambda: NOW)
        display.refresh()
        store.set(Source.QUOTES, parse_quotes(quotes_payload))
        assert display.refresh() is True
        assert "DDOG: 123.40 $ (+1.20%)" in frames[-1]

    def test_uses_configured_city(self, store):
        frames = []
        config = DashboardConfig(city="Nantes")
        DisplayLoop(store, frames.append, config, clock=lambda: NOW).refresh()
        assert "Nantes" in frames[0].splitlines()[0]


class TestLoop:
    def test_redraws_on_store_change(self, store, quotes_payload):
        frames = []
        config = DashboardConfig(display_tick_seconds=3600)
        display = DisplayLoop(store, frames.append, config, clock=lambda: NOW)
        display.start()
        try:
            assert _wait_for(lambda: display.frames_sent >= 1)
            store.set(Source.QUOTES, parse_quotes(quotes_payload))
            assert _wait_for(lambda: display.frames_sent >= 2)
            assert "CW8.PA: 512.30 € (-0.42%)" in frames[-1]
        finally:
            display.stop()

    def test_stop_unsubscribes(self, store):
        frames = []
        config = DashboardConfig(display_tick_seconds=3600)
        display = DisplayLoop(store, frames.append, config, clock=lambda: NOW)
        display.start()
        assert _wait_for(lambda: display.frames_sent >= 1)
        display.stop()
        sent = display.frames_sent
        store.set(Source.NEWS, ())
        time.sleep(0.05)
        assert display.frames_sent == sent
