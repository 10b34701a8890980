"""Tests for sprig.routing.route — Route, MatchResult, RoutingResult, ABSENT."""

import pytest

from sprig.routing.route import ABSENT, Absent, MatchResult, Route, RoutingResult


def _handler() -> str:
    return "ok"


class TestAbsent:
    def test_falsy(self) -> None:
        assert not ABSENT
        assert (ABSENT or "default") == "default"

    def test_distinct_from_none(self) -> None:
        assert ABSENT is not None
        assert ABSENT != None  # noqa: E711

    def test_equal_instances(self) -> None:
        assert Absent() == ABSENT

    def test_repr(self) -> None:
        assert repr(ABSENT) == "ABSENT"
        assert repr({"page": ABSENT}) == "{'page': ABSENT}"


class TestRoute:
    def test_creation(self) -> None:
        route = Route(pattern="hello/{name}", handler=_handler)
        assert route.pattern == "hello/{name}"
        assert route.handler is _handler

    def test_positional(self) -> None:
        route = Route("/", _handler)
        assert route.pattern == "/"

    def test_frozen(self) -> None:
        route = Route(pattern="/", handler=_handler)
        with pytest.raises(AttributeError):
            route.pattern = "/other"  # type: ignore[misc]


class TestMatchResult:
    def test_default_arguments_empty(self) -> None:
        assert MatchResult(matched=True).arguments == {}

    def test_failure(self) -> None:
        result = MatchResult.failure()
        assert result.matched is False
        assert result.arguments == {}

    def test_failed_result_cannot_carry_arguments(self) -> None:
        with pytest.raises(ValueError, match="cannot carry arguments"):
            MatchResult(matched=False, arguments={"name": "John"})

    def test_arguments_not_shared(self) -> None:
        assert MatchResult(matched=True).arguments is not MatchResult(matched=True).arguments


class TestRoutingResult:
    def test_creation(self) -> None:
        route = Route(pattern="hello/{name}", handler=_handler)
        result = RoutingResult(route=route, arguments={"name": "John"})
        assert result.route is route
        assert result.arguments == {"name": "John"}
        assert result.handler is _handler

    def test_dispatch_with_arguments(self) -> None:
        route = Route("hello/{name}", lambda args: f"Hello {args['name']}")
        assert RoutingResult(route=route, arguments={"name": "John"}).dispatch() == "Hello John"

    def test_dispatch_without_arguments(self) -> None:
        result = RoutingResult(route=Route("/", _handler), arguments={})
        assert result.dispatch() == "ok"

    def test_frozen(self) -> None:
        result = RoutingResult(route=Route("/", _handler), arguments={})
        with pytest.raises(AttributeError):
            result.arguments = {"x": "y"}  # type: ignore[misc]
