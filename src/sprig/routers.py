"""Delimiter-specific routers.

``uri_route`` splits on ``/`` and HTML-escapes extracted values so they
are safe to interpolate into markup. ``cli_route`` splits on a single
space and returns values untouched::

    routes = [
        Route("/", lambda: "Hello World!"),
        Route("hello/{name}", lambda args: f"Hello {args['name']}"),
    ]
    uri_route(routes, "hello/<br>John").arguments   # {"name": "&lt;br&gt;John"}
    uri_route(routes, "no/match")                   # None
"""

import html
from collections.abc import Iterable

from sprig._internal.functional import partial_right
from sprig.config import CLI_CONFIG, CLI_DELIMITER, URI_CONFIG, URI_DELIMITER, RouterConfig
from sprig.routing.matcher import Matcher
from sprig.routing.route import Absent, Argument, Route, RoutingResult
from sprig.routing.router import Router

__all__ = [
    "CLI_DELIMITER",
    "URI_DELIMITER",
    "cli_route",
    "escape_arguments",
    "route_with",
    "uri_route",
]

# html.escape(value, True): escapes &, <, > and both quote characters
_escape = partial_right(html.escape, True)


def _escape_argument(value: Argument) -> Argument:
    if isinstance(value, Absent):
        return value
    return _escape(value)


def escape_arguments(result: RoutingResult) -> RoutingResult:
    """Return a copy of *result* with every present argument HTML-escaped.

    ``ABSENT`` optional values pass through untouched.
    """
    arguments = {name: _escape_argument(value) for name, value in result.arguments.items()}
    return RoutingResult(route=result.route, arguments=arguments)


def route_with(config: RouterConfig, routes: Iterable[Route], query: str) -> RoutingResult | None:
    """Route *query* through *routes* using the delimiter and escaping of *config*."""
    result = Router(Matcher(config.delimiter)).route(routes, query)
    if result is None or not config.escape_arguments:
        return result
    return escape_arguments(result)


def uri_route(routes: Iterable[Route], query: str) -> RoutingResult | None:
    """Route a ``/``-separated path, escaping the extracted arguments."""
    return route_with(URI_CONFIG, routes, query)


def cli_route(routes: Iterable[Route], query: str) -> RoutingResult | None:
    """Route a space-separated command line, arguments returned as-is."""
    return route_with(CLI_CONFIG, routes, query)
