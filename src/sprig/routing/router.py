"""First-match router over an ordered route list.

Routes are tried strictly in the order the caller gives them; the first
pattern that matches wins. There is no sorting, scoring, or caching.
"""

import logging
from collections.abc import Iterable

from sprig.routing.matcher import Matcher
from sprig.routing.route import Route, RoutingResult

logger = logging.getLogger("sprig.routing")


class Router:
    """Linear first-match router.

    Usage::

        router = Router(Matcher("/"))
        routes = [
            Route("/", index),
            Route("hello/{name}", greet),
        ]
        result = router.route(routes, "hello/John")
        # RoutingResult(route=routes[1], arguments={"name": "John"})
        router.route(routes, "no/match")
        # None
    """

    __slots__ = ("matcher",)

    def __init__(self, matcher: Matcher) -> None:
        self.matcher = matcher

    def __repr__(self) -> str:
        return f"Router({self.matcher!r})"

    def route(self, routes: Iterable[Route], query: str) -> RoutingResult | None:
        """Return the first route whose pattern matches *query*.

        Returns ``None`` when no route matches. Never raises for "not found".
        """
        for route in routes:
            result = self.matcher.match(route.pattern, query)
            if result.matched:
                logger.debug("Matched %r against pattern %r", query, route.pattern)
                return RoutingResult(route=route, arguments=result.arguments)

        logger.debug("No route matches %r", query)
        return None

    __call__ = route
