"""Small function-composition helpers.

Used to build the tokenizer and the argument-escaping pipeline out of
plain callables::

    split_words = partial_right(str.split, " ")
    words = compose(split_words, sorted)("b a c")   # ["a", "b", "c"]
"""

from collections.abc import Callable, Iterable
from typing import Any


def append(items: Iterable[Any], *extra: Any) -> list[Any]:
    """Return a new list holding *items* followed by *extra*."""
    return [*items, *extra]


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Chain single-argument functions left to right.

    ``compose(f, g)(x)`` is ``g(f(x))``. With no functions, the result is
    the identity.
    """

    def composed(value: Any) -> Any:
        for function in functions:
            value = function(value)
        return value

    return composed


def partial_left(function: Callable[..., Any], *fixed: Any) -> Callable[..., Any]:
    """Fix the leftmost positional arguments of *function*.

    ``partial_left(str.replace, "a-b")("-", "+")`` is ``"a-b".replace("-", "+")``.
    """

    def applied(*passed: Any) -> Any:
        return function(*append(fixed, *passed))

    return applied


def partial_right(function: Callable[..., Any], *fixed: Any) -> Callable[..., Any]:
    """Fix the rightmost positional arguments of *function*.

    *fixed* is given starting from the last parameter, so
    ``partial_right(f, a, b)(x)`` calls ``f(x, b, a)``.
    """

    def applied(*passed: Any) -> Any:
        return function(*append(passed, *reversed(fixed)))

    return applied
