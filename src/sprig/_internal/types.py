"""Shared type aliases used across sprig modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: user-defined function, called with the arguments mapping or bare
Handler: TypeAlias = Callable[..., Any]
