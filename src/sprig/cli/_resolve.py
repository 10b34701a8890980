"""Route table import resolution.

Resolves ``"module:attribute"`` strings to a list of sprig Routes. Shared
by ``sprig routes`` and ``sprig dispatch``.
"""

import importlib
from collections.abc import Sequence

from sprig.errors import RouteResolutionError
from sprig.routing.route import Route


def resolve_routes(import_string: str) -> list[Route]:
    """Resolve an import string to a route table.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"routes"`` (e.g. ``"myapp"`` resolves to
    ``myapp.routes``).

    Supports factory functions: if the resolved object is callable, it is
    called and its return value used as the table.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:routes"``, ``"myapp.cli:make_routes"``).

    Returns:
        The routes, in the order the module declares them.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        RouteResolutionError: If the factory fails or the object is not a
            sequence of ``Route``.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise RouteResolutionError(msg) from exc

    if isinstance(obj, (str, bytes)) or not isinstance(obj, Sequence):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a sequence of sprig Routes"
        raise RouteResolutionError(msg)

    for item in obj:
        if not isinstance(item, Route):
            msg = f"{import_string!r} contains {type(item).__name__}, not a sprig Route"
            raise RouteResolutionError(msg)

    return list(obj)
