"""Routing: tokenizer, matcher, and first-match router.

Routes are plain (pattern, handler) pairs supplied by the caller on every
call; nothing is registered or compiled ahead of time.
"""

from sprig.routing.matcher import Matcher
from sprig.routing.route import ABSENT, Absent, Argument, MatchResult, Route, RoutingResult
from sprig.routing.router import Router
from sprig.routing.segments import Segment, SegmentKind, parse_pattern, parse_segment, tokenize

__all__ = [
    "ABSENT",
    "Absent",
    "Argument",
    "MatchResult",
    "Matcher",
    "Route",
    "Router",
    "RoutingResult",
    "Segment",
    "SegmentKind",
    "parse_pattern",
    "parse_segment",
    "tokenize",
]
