"""
Grouping policy
===============

Which characters delimit the groups a text traversal visits.
"""

from __future__ import annotations

from dataclasses import dataclass

from .chars import LINE_TERMINATORS, CharPredicate, chars_in, is_whitespace


@dataclass(frozen=True, slots=True)
class GroupPolicy:
    """
    Grouping configuration for `groups()`.

    Groups are the maximal runs of characters for which `is_delimiting` is
    false; the delimiter runs between them are kept on write-back but never
    visited.
    """

    is_delimiting: CharPredicate

    def __post_init__(self) -> None:
        if not callable(self.is_delimiting):
            raise TypeError("GroupPolicy.is_delimiting must be callable")

    @classmethod
    def chars(cls, delimiters: str) -> GroupPolicy:
        """
        Delimit on any character of `delimiters`.

        An empty string delimits nothing: a non-empty text is a single group.
        """
        return cls(is_delimiting=chars_in(delimiters))

    @classmethod
    def whitespace(cls) -> GroupPolicy:
        """Delimit on word-separating whitespace: groups are words."""
        return cls(is_delimiting=is_whitespace)

    @classmethod
    def line_terminators(cls) -> GroupPolicy:
        """Delimit on line terminators: groups are non-empty lines."""
        return cls(is_delimiting=chars_in(LINE_TERMINATORS))


__all__ = ("GroupPolicy",)
