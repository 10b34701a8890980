"""``sprig dispatch`` — route a query and run the matched handler."""

import argparse
import logging
import sys

from sprig.cli._resolve import resolve_routes
from sprig.config import CLI_DELIMITER, URI_DELIMITER
from sprig.errors import RouteResolutionError
from sprig.routers import cli_route, uri_route

logger = logging.getLogger("sprig.cli")


def run_dispatch(args: argparse.Namespace) -> None:
    """Resolve ``args.table``, route ``args.query``, and print the handler's result.

    Query words are joined with the delimiter of the chosen mode. Exits
    with code 1 when the table cannot be loaded or nothing matches.
    """
    try:
        routes = resolve_routes(args.table)
    except (ModuleNotFoundError, AttributeError, RouteResolutionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.uri:
        query = URI_DELIMITER.join(args.query)
        result = uri_route(routes, query)
    else:
        query = CLI_DELIMITER.join(args.query)
        result = cli_route(routes, query)

    if result is None:
        print(f"No route matches {query!r}", file=sys.stderr)
        raise SystemExit(1)

    logger.debug("Dispatching %r to %r", query, result.route.pattern)
    output = result.dispatch()
    if output is not None:
        print(output)
