"""
Character callables
===================

Characters are one-character strings. Predicates and operators over them
are plain callables; the helpers below combine them.
"""

from __future__ import annotations

from collections.abc import Callable

# CharPredicate = test on a single character
type CharPredicate = Callable[[str], bool]

# CharUnaryOperator = single character in, single character out
type CharUnaryOperator = Callable[[str], str]

# CharFunction = single character in, anything out (flat_map wants a string)
type CharFunction[R] = Callable[[str], R]

# Characters str.isspace accepts that do not separate words: NEL and the
# no-break spaces U+00A0, U+2007, U+202F
NON_SEPARATING_SPACES = "\x85\u00a0\u2007\u202f"

# Characters that end a line: \n, \r, NEL, LINE SEPARATOR, PARAGRAPH SEPARATOR
LINE_TERMINATORS = "\n\r\x85\u2028\u2029"


def chars_in(chars: str) -> CharPredicate:
    """Predicate accepting any character of `chars`."""
    members = frozenset(chars)

    def check(c: str) -> bool:
        return c in members

    return check


def is_whitespace(c: str) -> bool:
    """Word-separating whitespace: str.isspace without NON_SEPARATING_SPACES."""
    return c.isspace() and c not in NON_SEPARATING_SPACES


def negate(predicate: CharPredicate) -> CharPredicate:
    def check(c: str) -> bool:
        return not predicate(c)

    return check


def all_of(*predicates: CharPredicate) -> CharPredicate:
    """Short-circuiting AND."""
    def check(c: str) -> bool:
        return all(predicate(c) for predicate in predicates)

    return check


def any_of(*predicates: CharPredicate) -> CharPredicate:
    """Short-circuiting OR."""
    def check(c: str) -> bool:
        return any(predicate(c) for predicate in predicates)

    return check


def compose_ops(*ops: CharUnaryOperator) -> CharUnaryOperator:
    """Apply `ops` left to right. No ops gives the identity operator."""
    def apply(c: str) -> str:
        for op in ops:
            c = op(c)
        return c

    return apply


__all__ = (
    "LINE_TERMINATORS",
    "NON_SEPARATING_SPACES",
    "CharFunction",
    "CharPredicate",
    "CharUnaryOperator",
    "all_of",
    "any_of",
    "chars_in",
    "compose_ops",
    "is_whitespace",
    "negate",
)
