"""Wren CLI — inspect a router from the command line.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — URL routing with compact bracket templates.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log routing decisions")
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("router", help="Import string (e.g. myapp:router)")

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a request hits")
    match_parser.add_argument("router", help="Import string (e.g. myapp:router)")
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("path", help="Request path, optionally with a query string")

    # -- wren url ---------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Generate the URL of a named route")
    url_parser.add_argument("router", help="Import string (e.g. myapp:router)")
    url_parser.add_argument("name", help="Route name")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="key=value",
        help="Route parameters",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
    elif args.command == "url":
        from wren.cli._match import run_url

        run_url(args)
