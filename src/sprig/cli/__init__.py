"""Sprig CLI: try patterns, list route tables, and dispatch queries.

Entry point registered as ``sprig`` in ``pyproject.toml``::

    [project.scripts]
    sprig = "sprig.cli:main"
"""

import argparse
import logging
import sys


def _add_mode_flags(parser: argparse.ArgumentParser) -> None:
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--uri",
        action="store_true",
        help="Split on '/' and HTML-escape extracted arguments",
    )
    mode.add_argument(
        "--cli",
        action="store_true",
        help="Split on a single space (default)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``sprig`` command."""
    parser = argparse.ArgumentParser(
        prog="sprig",
        description="Sprig — first-match pattern routing for paths and command lines.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log routing decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- sprig match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match one pattern against a query")
    match_parser.add_argument("pattern", help="Pattern, e.g. 'greet {name}'")
    match_parser.add_argument("query", help="Query to match, e.g. 'greet John'")
    _add_mode_flags(match_parser)
    match_parser.add_argument(
        "--delimiter",
        default=None,
        help="Custom segment delimiter (replaces the --uri/--cli split; --uri still escapes)",
    )

    # -- sprig routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List a route table")
    routes_parser.add_argument(
        "table",
        help="Import string (e.g. myapp:routes)",
    )

    # -- sprig dispatch ---------------------------------------------------
    dispatch_parser = subparsers.add_parser(
        "dispatch", help="Route a query and run the matched handler"
    )
    dispatch_parser.add_argument(
        "table",
        help="Import string (e.g. myapp:routes)",
    )
    dispatch_parser.add_argument(
        "query",
        nargs="*",
        help="Query words, joined by a single space",
    )
    _add_mode_flags(dispatch_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from sprig.cli._match import run_match

        run_match(args)
    elif args.command == "routes":
        from sprig.cli._routes import run_routes

        run_routes(args)
    elif args.command == "dispatch":
        from sprig.cli._dispatch import run_dispatch

        run_dispatch(args)
