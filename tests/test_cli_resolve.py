"""Tests for sprig.cli._resolve — route table import resolution."""

import sys
import types

import pytest

from sprig.cli._resolve import resolve_routes
from sprig.errors import RouteResolutionError
from sprig.routing.route import Route


def _index() -> str:
    return "index"


def _broken_factory() -> list[Route]:
    msg = "boom"
    raise RuntimeError(msg)


@pytest.fixture
def _fake_routes_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with sprig route tables on sys.modules."""
    mod = types.ModuleType("_fake_sprig_routes")
    mod.routes = [Route("", _index), Route("greet {name}", _index)]  # type: ignore[attr-defined]
    mod.custom = (Route("/", _index),)  # type: ignore[attr-defined]
    mod.make_routes = lambda: [Route("made", _index)]  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.not_routes = "just a string"  # type: ignore[attr-defined]
    mod.mixed = [Route("a", _index), ("b", _index)]  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_sprig_routes", mod)


@pytest.mark.usefixtures("_fake_routes_module")
class TestResolveRoutes:
    def test_explicit_attribute(self) -> None:
        routes = resolve_routes("_fake_sprig_routes:routes")
        assert [r.pattern for r in routes] == ["", "greet {name}"]

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'routes'."""
        routes = resolve_routes("_fake_sprig_routes")
        assert len(routes) == 2

    def test_tuple_becomes_list(self) -> None:
        routes = resolve_routes("_fake_sprig_routes:custom")
        assert isinstance(routes, list)
        assert routes[0].pattern == "/"

    def test_factory(self) -> None:
        routes = resolve_routes("_fake_sprig_routes:make_routes")
        assert routes[0].pattern == "made"

    def test_failing_factory(self) -> None:
        with pytest.raises(RouteResolutionError, match="raised an error: boom"):
            resolve_routes("_fake_sprig_routes:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_routes("nonexistent_module_xyz:routes")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_routes("_fake_sprig_routes:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(RouteResolutionError, match="not a sequence of sprig Routes"):
            resolve_routes("_fake_sprig_routes:not_routes")

    def test_non_route_item(self) -> None:
        with pytest.raises(RouteResolutionError, match="contains tuple"):
            resolve_routes("_fake_sprig_routes:mixed")
