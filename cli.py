#!/usr/bin/env python3
"""Contact book CLI."""
from __future__ import annotations

import argparse
import logging
import sys

from contact_book.config import ConfigError, Settings, load_settings
from contact_book.contacts import (
    ContactAPIError,
    LocalContactModel,
    get_storage,
    list_remote_contacts,
)
from contact_book.interfaces import build_local_app, build_remote_app, run_terminal
from contact_book.interfaces.view import ContactView


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contact-book",
        description="Manage contacts stored locally or behind the contacts API.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the contacts HTTP API.",
    )
    serve_parser.add_argument("--host", help="Bind address (default from settings).")
    serve_parser.add_argument("--port", type=int, help="Port (default from settings).")

    subparsers.add_parser(
        "local",
        help="Open the interactive contact list backed by local storage.",
    )

    subparsers.add_parser(
        "remote",
        help="Open the interactive contact list backed by the contacts API.",
    )

    list_parser = subparsers.add_parser(
        "list",
        help="Print every contact and exit.",
    )
    list_parser.add_argument(
        "--source",
        choices=("local", "remote"),
        default="local",
        help="Read from local storage or from the contacts API.",
    )

    return parser


def _cmd_serve(settings: Settings, host: str | None, port: int | None) -> int:
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=host or settings.server_host,
        port=port or settings.server_port,
        log_level=settings.log_level.lower(),
    )
    return 0


def _cmd_list(settings: Settings, source: str) -> int:
    if source == "remote":
        try:
            contacts = list_remote_contacts(settings.api_url, timeout=settings.api_timeout)
        except ContactAPIError as exc:
            print(exc, file=sys.stderr)
            return 1
    else:
        contacts = LocalContactModel(get_storage(settings)).contacts

    view = ContactView()
    view.display_contacts(contacts)
    print(view.render_text())
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return _cmd_serve(settings, args.host, args.port)
    if args.command == "list":
        return _cmd_list(settings, args.source)
    if args.command == "local":
        run_terminal(build_local_app(settings))
        return 0
    if args.command == "remote":
        run_terminal(build_remote_app(settings))
        return 0

    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
