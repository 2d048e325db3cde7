"""Command-line interface for quotes, time series and the HTTP server."""

from __future__ import annotations

import argparse
import json
import sys

from stockquotes.config import Settings
from stockquotes.core.normalizer import envelope_to_dict
from stockquotes.errors import ConfigError
from stockquotes.logging.logger import setup_logger
from stockquotes.report import render_time_series_chart
from stockquotes.service import get_stock_quote, get_time_series


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description="Normalized Twelve Data quotes")
    parser.add_argument("--api-key", type=str, help="Twelve Data API key")
    parser.add_argument("--timeout", type=float, help="Upstream request timeout in seconds")
    parser.add_argument("--log-level", type=str, help="Logging level")
    commands = parser.add_subparsers(dest="command", required=True)

    quote = commands.add_parser("quote", help="Fetch a single quote")
    quote.add_argument("symbol", type=str, help="Stock symbol")
    quote.add_argument("--realtime", action="store_true", help="Fetch only the latest price")

    series = commands.add_parser("series", help="Fetch 5-minute closes for the last open day")
    series.add_argument("symbol", type=str, help="Stock symbol")
    series.add_argument("--chart", type=str, help="Write a Plotly HTML chart to this path")

    serve = commands.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", type=str, help="Bind address")
    serve.add_argument("--port", type=int, help="Bind port")
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    overrides: dict[str, object] = {}
    if args.api_key:
        overrides["twelvedata_api_key"] = args.api_key.strip()
    if args.timeout is not None:
        overrides["request_timeout_seconds"] = args.timeout
    if args.log_level:
        overrides["log_level"] = args.log_level.strip().upper()
    if args.command == "serve":
        if args.host:
            overrides["host"] = args.host
        if args.port is not None:
            overrides["port"] = args.port
    return settings.with_overrides(**overrides)


def serve(settings: Settings) -> int:
    import uvicorn

    from stockquotes.api import create_app

    uvicorn.run(
        create_app(settings_factory=lambda: settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except (ConfigError, ValueError) as exc:
        print(f"Configuration error: {exc}")
        return 2
    setup_logger(settings.log_level, settings.log_file)

    if args.command == "serve":
        return serve(settings)
    if args.command == "quote":
        envelope = get_stock_quote(args.symbol, args.realtime, settings=settings)
    else:
        envelope = get_time_series(args.symbol, settings=settings)
        if args.chart:
            render_time_series_chart(envelope, args.chart, title=f"{args.symbol.upper()} 5min closes")

    print(json.dumps(envelope_to_dict(envelope), indent=2))
    return 1 if envelope.is_error else 0


if __name__ == "__main__":
    sys.exit(main())
