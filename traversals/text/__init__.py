"""
Text domain: a mutable character buffer and traversals over its groups,
words and lines.
"""

from .chars import (
    LINE_TERMINATORS,
    NON_SEPARATING_SPACES,
    CharFunction,
    CharPredicate,
    CharUnaryOperator,
    all_of,
    any_of,
    chars_in,
    compose_ops,
    is_whitespace,
    negate,
)
from .grouping import groups, lines, words
from .policy import GroupPolicy
from .text import Chars, Text

__all__ = (
    # Buffer
    "Chars",
    "Text",
    # Character callables
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
    # Traversals
    "GroupPolicy",
    "groups",
    "lines",
    "words",
)
