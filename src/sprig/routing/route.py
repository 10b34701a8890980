"""Route, MatchResult, and RoutingResult frozen dataclasses."""

from dataclasses import dataclass, field
from typing import Any, TypeAlias

from sprig._internal.invoke import invoke
from sprig._internal.types import Handler


@dataclass(frozen=True, slots=True)
class Absent:
    """Value bound to an optional parameter that had no query segment.

    Distinct from ``None`` and from a missing key, so a handler can tell
    "declared but not supplied" apart from "never declared". Falsy, so
    ``arguments["page"] or "1"`` reads naturally.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Absent = Absent()

# A bound parameter value: the query segment, or ABSENT for a missing optional
Argument: TypeAlias = str | Absent


@dataclass(frozen=True, slots=True)
class Route:
    """A pattern paired with the handler it routes to.

    Owned by the caller; routers only read it.
    """

    pattern: str
    handler: Handler


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Verdict of matching one pattern against one query.

    A failed match never carries arguments.
    """

    matched: bool
    arguments: dict[str, Argument] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.matched and self.arguments:
            msg = "A failed MatchResult cannot carry arguments."
            raise ValueError(msg)

    @classmethod
    def failure(cls) -> "MatchResult":
        return cls(matched=False)


@dataclass(frozen=True, slots=True)
class RoutingResult:
    """Result of a successful routing call."""

    route: Route
    arguments: dict[str, Argument]

    @property
    def handler(self) -> Handler:
        return self.route.handler

    def dispatch(self) -> Any:
        """Call the matched handler with the extracted arguments."""
        return invoke(self.route.handler, self.arguments)
