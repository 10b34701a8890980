"""Invoke helpers: call route handlers uniformly.

Handlers may take the arguments mapping or nothing at all (an index
route usually has no parameters). Any code that calls a user-provided
handler goes through :func:`invoke` so the signature check lives in
exactly one place.

Usage::

    from sprig._internal.invoke import invoke

    result = invoke(handler, {"name": "John"})
"""

import inspect
from collections.abc import Mapping
from typing import Any

from sprig._internal.types import Handler

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def accepts_arguments(handler: Handler) -> bool:
    """True when *handler* can receive the arguments mapping positionally.

    Callables without an inspectable signature are assumed to accept it.
    """
    try:
        sig = inspect.signature(handler)
    except (TypeError, ValueError):
        return True
    return any(p.kind in _POSITIONAL for p in sig.parameters.values())


def invoke(handler: Handler, arguments: Mapping[str, Any]) -> Any:
    """Call *handler* with *arguments*, or bare if it takes no parameters::

        invoke(lambda: "Hello World!", {})                    # "Hello World!"
        invoke(lambda args: f"Hello {args['name']}", {"name": "John"})
    """
    if accepts_arguments(handler):
        return handler(arguments)
    return handler()
