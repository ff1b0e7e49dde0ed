"""CLI entry point for running the snippet tool endpoint locally."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .logging import configure_logging, get_logger
from .settings import load_dispatcher_settings

LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the snippet tool endpoint")
    parser.add_argument(
        "transport",
        choices=["http", "stdio"],
        nargs="?",
        default="http",
        help="http serves the dispatcher route; stdio serves the MCP tools (default: http)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host for the http transport")
    parser.add_argument("--port", type=int, default=7071, help="Port for the http transport")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    configure_logging(load_dispatcher_settings().log_level)
    if args.transport == "stdio":
        from .snippets import build_snippet_server

        build_snippet_server().run()
    elif args.transport == "http":
        import uvicorn

        from .http import create_app

        app = create_app()
        LOGGER.info("http_server_starting", host=args.host, port=args.port)
        uvicorn.run(app, host=args.host, port=args.port)
    else:
        raise ValueError(f"Unsupported transport {args.transport}")


if __name__ == "__main__":  # pragma: no cover
    main()
