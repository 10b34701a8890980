"""Tokenizing and classifying pattern segments.

Patterns and queries are split on a delimiter into non-empty segments.
Pattern segments come in three kinds::

    "users"   -> literal, matches only "users"
    "{id}"    -> required parameter "id"
    "{?page}" -> optional parameter "page"
"""

from dataclasses import dataclass
from enum import Enum

from sprig._internal.functional import compose, partial_right

OPTIONAL_PARAMETER_OPENING = "{?"
PARAMETER_OPENING = "{"
PARAMETER_CLOSING = "}"


class SegmentKind(Enum):
    """How a pattern segment is compared against a query segment."""

    LITERAL = "literal"
    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed pattern segment.

    Literal:   ``users``    (kind=LITERAL, name="")
    Required:  ``{id}``     (kind=REQUIRED, name="id")
    Optional:  ``{?page}``  (kind=OPTIONAL, name="page")
    """

    value: str
    kind: SegmentKind = SegmentKind.LITERAL
    name: str = ""


def _drop_empty(tokens: list[str]) -> list[str]:
    return [token for token in tokens if token]


def tokenize(delimiter: str, text: str) -> list[str]:
    """Split *text* on *delimiter*, discarding empty tokens.

    Examples::

        tokenize("/", "/greet/John/") -> ["greet", "John"]
        tokenize("/", "/")            -> []
        tokenize(" ", "greet  John")  -> ["greet", "John"]
    """
    return compose(partial_right(str.split, delimiter), _drop_empty)(text)


def _parameter_name(token: str, opening: str) -> str:
    return token[len(opening) : -len(PARAMETER_CLOSING)]


def parse_segment(token: str) -> Segment:
    """Classify a single pattern token.

    The optional opener is checked first since ``{?`` also starts with ``{``.
    Tokens too short to hold the opener are never optional parameters.
    """
    if token.startswith(OPTIONAL_PARAMETER_OPENING):
        return Segment(
            value=token,
            kind=SegmentKind.OPTIONAL,
            name=_parameter_name(token, OPTIONAL_PARAMETER_OPENING),
        )
    if token.startswith(PARAMETER_OPENING):
        return Segment(
            value=token,
            kind=SegmentKind.REQUIRED,
            name=_parameter_name(token, PARAMETER_OPENING),
        )
    return Segment(value=token)


def parse_pattern(delimiter: str, pattern: str) -> list[Segment]:
    """Tokenize *pattern* and classify every segment.

    Examples::

        parse_pattern("/", "/users")          -> [Segment("users")]
        parse_pattern("/", "/users/{id}")     -> [Segment("users"), Segment("{id}", REQUIRED, "id")]
        parse_pattern(" ", "list {?page}")    -> [Segment("list"), Segment("{?page}", OPTIONAL, "page")]
    """
    return [parse_segment(token) for token in tokenize(delimiter, pattern)]
