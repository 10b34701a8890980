"""Sprig — first-match pattern routing for paths and command lines.

Give sprig an ordered list of routes and a query; it returns the first
route whose pattern matches, with the named parameters pulled out.

Basic usage::

    from sprig import Route, cli_route, uri_route

    routes = [
        Route("/", lambda: "Hello World!"),
        Route("hello/{name}", lambda args: f"Hello {args['name']}"),
        Route("list {?page}", lambda args: args["page"] or "1"),
    ]

    result = uri_route(routes, "hello/John")
    result.arguments   # {"name": "John"}
    result.dispatch()  # "Hello John"

    cli_route(routes, "no match")  # None
"""

__version__ = "0.1.0"
__all__ = [
    "ABSENT",
    "Absent",
    "ConfigurationError",
    "InvalidQueryError",
    "MatchResult",
    "Matcher",
    "Route",
    "RouteResolutionError",
    "Router",
    "RouterConfig",
    "RoutingResult",
    "SprigError",
    "cli_route",
    "route_with",
    "uri_route",
]


# Public name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ABSENT": "sprig.routing.route",
    "Absent": "sprig.routing.route",
    "MatchResult": "sprig.routing.route",
    "Route": "sprig.routing.route",
    "RoutingResult": "sprig.routing.route",
    "Matcher": "sprig.routing.matcher",
    "Router": "sprig.routing.router",
    "RouterConfig": "sprig.config",
    "cli_route": "sprig.routers",
    "route_with": "sprig.routers",
    "uri_route": "sprig.routers",
    "ConfigurationError": "sprig.errors",
    "InvalidQueryError": "sprig.errors",
    "RouteResolutionError": "sprig.errors",
    "SprigError": "sprig.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sprig`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
