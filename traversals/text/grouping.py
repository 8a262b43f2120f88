"""
Text traversals
===============

Traversals over the groups of a text. Reading visits the content groups;
writing re-serializes all groups, delimiters included, back into the text.
"""

from __future__ import annotations

from .._helpers import identity
from ..traversal import Traversal, identity_for
from .chars import CharPredicate
from .policy import GroupPolicy
from .text import Text


def _as_policy(delimiters: str | CharPredicate | GroupPolicy) -> GroupPolicy:
    match delimiters:
        case GroupPolicy():
            return delimiters
        case str():
            return GroupPolicy.chars(delimiters)
        case _:
            return GroupPolicy(is_delimiting=delimiters)


def _rejoin(text: Text, parts: list[Text]) -> None:
    text.delete().extend(parts)


def groups(delimiters: str | CharPredicate | GroupPolicy) -> Traversal[Text, Text]:
    """
    Non-empty runs of non-delimiting characters.

    `delimiters` is a string of delimiting characters, a predicate on
    characters, or a GroupPolicy.
    """
    is_delimiting = _as_policy(delimiters).is_delimiting

    def is_content(part: Text) -> bool:
        return not is_delimiting(part.char_at(0))

    return (
        identity_for(Text)
        .map(lambda text: text.group(is_delimiting), _rejoin)
        .flat_map(identity)
        .filter(is_content)
    )


def words() -> Traversal[Text, Text]:
    """Whitespace-separated words."""
    return groups(GroupPolicy.whitespace())


def lines() -> Traversal[Text, Text]:
    """Non-empty lines."""
    return groups(GroupPolicy.line_terminators())


__all__ = ("groups", "lines", "words")
