"""Internal helpers for traversals.

Small functions shared by the builder and the materialization helpers.
Not part of the public API."""

from __future__ import annotations

from ._types import IndexPredicate

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Index predicates
def index_is(index: int) -> IndexPredicate:
    """Predicate accepting exactly `index`."""
    def check(i: int) -> bool:
        return i == index
    return check

def index_is_not(index: int) -> IndexPredicate:
    """Predicate accepting every position except `index`."""
    def check(i: int) -> bool:
        return i != index
    return check

__all__ = (
    "identity",
    "index_is",
    "index_is_not",
)
