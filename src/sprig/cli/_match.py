"""``sprig match`` — try a single pattern against a query.

Prints the extracted arguments as JSON and exits 0 on a match, or
prints ``no match`` and exits 1. ``--uri`` HTML-escapes the arguments
the same way ``uri_route`` does.
"""

import argparse
import json
import sys

from sprig.config import CLI_DELIMITER, URI_DELIMITER, RouterConfig
from sprig.errors import ConfigurationError
from sprig.routers import route_with
from sprig.routing.route import Absent, Argument, Route
from sprig.routing.segments import tokenize


def _jsonable(arguments: dict[str, Argument]) -> dict[str, str | None]:
    return {name: None if isinstance(value, Absent) else value for name, value in arguments.items()}


def _config(args: argparse.Namespace) -> RouterConfig:
    delimiter = args.delimiter
    if delimiter is None:
        delimiter = URI_DELIMITER if args.uri else CLI_DELIMITER
    return RouterConfig(delimiter=delimiter, escape_arguments=args.uri)


def _unused_handler() -> None:
    return None


def run_match(args: argparse.Namespace) -> None:
    try:
        config = _config(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    result = route_with(config, [Route(args.pattern, _unused_handler)], args.query)
    if result is None:
        segments = tokenize(config.delimiter, args.query)
        print(f"no match ({len(segments)} query segments)")
        raise SystemExit(1)
    print(json.dumps(_jsonable(result.arguments), sort_keys=True))
