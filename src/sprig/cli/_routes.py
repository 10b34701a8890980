"""``sprig routes`` — list a route table.

Resolves an import string to a route table and prints every route with
its pattern and handler name, in match order.
"""

import argparse
import sys

from sprig.cli._resolve import resolve_routes
from sprig.errors import RouteResolutionError


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN and HANDLER for ``args.table``."""
    try:
        routes = resolve_routes(args.table)
    except (ModuleNotFoundError, AttributeError, RouteResolutionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        rows.append((repr(route.pattern), handler_name))

    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_pattern}}}  {{}}"
    print(fmt.format("PATTERN", "HANDLER"))
    sep_len = max_pattern + 2 + max(len(r[1]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, handler_name in rows:
        print(fmt.format(pattern, handler_name))
