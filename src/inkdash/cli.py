"""Command-line interface for the inkdash dashboard."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from inkdash import config_from_env
from inkdash.config import ClientType, DashboardConfig
from inkdash.dashboard import Dashboard
from inkdash.display import Sink, stdout_sink
from inkdash.log import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description="Stale-tolerant e-ink status dashboard")
    parser.add_argument("--once", action="store_true", help="Poll every source once, print, exit")
    parser.add_argument("--base-url", type=str, help="Dashboard backend base URL")
    parser.add_argument("--tickers", type=str, help="Comma-separated quote tickers")
    parser.add_argument("--city", type=str, help="City label next to the weather strip")
    parser.add_argument("--locale", type=str, help="Number locale for portfolio values")
    parser.add_argument("--timeout", type=float, help="HTTP request timeout in seconds")
    parser.add_argument(
        "--display-tick", type=int, help="Seconds between unconditional redraws"
    )
    parser.add_argument("--mock", action="store_true", help="Use built-in sample data")
    parser.add_argument(
        "--output", type=Path, help="Write each frame to this file instead of stdout"
    )
    parser.add_argument("--log-level", type=str, help="Log level (DEBUG, INFO, ...)")
    return parser


def apply_cli_overrides(config: DashboardConfig, args: argparse.Namespace) -> DashboardConfig:
    """Apply CLI values onto environment-derived config."""
    overrides: dict[str, object] = {}
    if args.base_url:
        overrides["api_base_url"] = args.base_url
    if args.tickers:
        tickers = [t.strip() for t in args.tickers.split(",") if t.strip()]
        if not tickers:
            raise ValueError("--tickers must name at least one ticker")
        overrides["tickers"] = tickers
    if args.city:
        overrides["city"] = args.city
    if args.locale:
        overrides["locale"] = args.locale
    if args.timeout is not None:
        if args.timeout <= 0:
            raise ValueError("--timeout must be positive")
        overrides["request_timeout"] = args.timeout
    if args.display_tick is not None:
        if args.display_tick <= 0:
            raise ValueError("--display-tick must be positive")
        overrides["display_tick_seconds"] = args.display_tick
    if args.mock:
        overrides["client"] = ClientType.MOCK
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    return replace(config, **overrides)


def file_sink(path: Path) -> Sink:
    def write(frame: str) -> None:
        path.write_text(frame, encoding="utf-8")

    return write


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = apply_cli_overrides(config_from_env(), args)
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)
    sink = file_sink(args.output) if args.output else stdout_sink
    dashboard = Dashboard(config, sink=sink)

    if args.once:
        try:
            dashboard.refresh_all()
        finally:
            dashboard.client.close()
        return 0

    try:
        with dashboard:
            dashboard.wait()
    except KeyboardInterrupt:
        logger.info("interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
