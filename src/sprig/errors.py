"""Sprig exception hierarchy.

Shared across the matcher, router, and CLI so every module raises and
catches the same types. A query that matches no route is not an error:
routers return ``None`` for it.
"""


class SprigError(Exception):
    """Base for all sprig-specific errors."""


class ConfigurationError(SprigError):
    """Raised when a router or matcher is configured with an unusable delimiter."""


class InvalidQueryError(SprigError, TypeError):
    """A pattern or query handed to the matcher is not a string.

    This is a contract violation at the call boundary, not a recoverable
    condition. It subclasses ``TypeError`` so callers that already guard
    against bad argument types keep working.
    """

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a str, got {type(value).__name__}")


class RouteResolutionError(SprigError):
    """An import string did not resolve to a usable route table."""
