"""
Core type definitions for traversals.

Aliases for the callables that flow through every combinator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

# ============================================================================
# Type aliases
# ============================================================================

# Consumer = side-effecting receiver of a single value
type Consumer[T] = Callable[[T], None]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# IndexPredicate = predicate over 0-based visitation positions
type IndexPredicate = Callable[[int], bool]

# Getter = derives a new part from an old one
type Getter[P, Q] = Callable[[P], Q]

# Putter = writes a (possibly mutated) derived part back into the old one
type Putter[P, Q] = Callable[[P, Q], None]

# Expand = turns one part into any number of new parts
type Expand[P, Q] = Callable[[P], Iterable[Q]]

# Lowered = the continuation-passing form of a traversal
# NOTE: Traversal[R, P] lowers to Consumer[P] -> Consumer[R].
#       Supplying what to do with each part yields what to do with a root.
type Lowered[R, P] = Callable[[Consumer[P]], Consumer[R]]

__all__ = (
    "Consumer",
    "Expand",
    "Getter",
    "IndexPredicate",
    "Lowered",
    "Predicate",
    "Putter",
)
