"""Segment-by-segment pattern matching.

A ``Matcher`` is bound to one delimiter and compares a pattern against a
query, binding named parameters as it goes::

    matcher = Matcher(" ")
    matcher.match("greet {name}", "greet John")
    # MatchResult(matched=True, arguments={"name": "John"})
    matcher.match("list {?page}", "list")
    # MatchResult(matched=True, arguments={"page": ABSENT})
    matcher.match("greet {name}", "greet")
    # MatchResult(matched=False, arguments={})
"""

from sprig.errors import ConfigurationError, InvalidQueryError
from sprig.routing.route import ABSENT, Argument, MatchResult
from sprig.routing.segments import SegmentKind, parse_pattern, tokenize


class Matcher:
    """Matches patterns against queries split on a fixed delimiter."""

    __slots__ = ("delimiter",)

    def __init__(self, delimiter: str) -> None:
        if not isinstance(delimiter, str) or not delimiter:
            msg = f"Matcher delimiter must be a non-empty str, got {delimiter!r}."
            raise ConfigurationError(msg)
        self.delimiter = delimiter

    def __repr__(self) -> str:
        return f"Matcher({self.delimiter!r})"

    def match(self, pattern: str, query: str) -> MatchResult:
        """Match *query* against *pattern*.

        A query with more segments than the pattern never matches. Each
        pattern segment is paired with the query segment at the same
        position: optional parameters always bind (to ``ABSENT`` when the
        query ran out), required parameters bind when a query segment is
        present, and everything else must be equal to the query segment.

        Raises ``InvalidQueryError`` if *pattern* or *query* is not a str.
        """
        if not isinstance(pattern, str):
            raise InvalidQueryError("pattern", pattern)
        if not isinstance(query, str):
            raise InvalidQueryError("query", query)

        segments = parse_pattern(self.delimiter, pattern)
        parts = tokenize(self.delimiter, query)

        if len(parts) > len(segments):
            return MatchResult.failure()

        arguments: dict[str, Argument] = {}
        for index, segment in enumerate(segments):
            part = parts[index] if index < len(parts) else None

            if segment.kind is SegmentKind.OPTIONAL:
                arguments[segment.name] = ABSENT if part is None else part
                continue

            if segment.kind is SegmentKind.REQUIRED and part is not None:
                arguments[segment.name] = part
                continue

            # Literal, or a required parameter the query did not supply
            if segment.value != part:
                return MatchResult.failure()

        return MatchResult(matched=True, arguments=arguments)

    __call__ = match
