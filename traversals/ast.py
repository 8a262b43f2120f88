"""
AST for traversal combinators.

Architecture:
- Expr[R, P] - node describing how to visit parts P inside a root R
- Every node lowers into continuation-passing form:
  given a consumer of parts, it returns a consumer of roots
- Traversal (see traversal.py) is the fluent sugar wrapping these nodes

Nodes are frozen: a traversal carries no evaluation state. Anything that
has to live for exactly one evaluation (the running index) is allocated
inside the root consumer, never on the node.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._types import Consumer, Expand, Getter, Predicate, Putter
from .indexed import Counter, Indexed


class Expr[R, P]:
    """
    AST node that can be lowered into a root consumer.
    """

    def lower(self, receive: Consumer[P]) -> Consumer[R]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Root[T](Expr[T, T]):
    """The whole root is the single part."""

    def lower(self, receive: Consumer[T]) -> Consumer[T]:
        return receive


@dataclass(frozen=True, slots=True)
class Map[R, P, Q](Expr[R, Q]):
    inner: Expr[R, P]
    get: Getter[P, Q]

    def lower(self, receive: Consumer[Q]) -> Consumer[R]:
        get = self.get

        def visit(part: P) -> None:
            receive(get(part))

        return self.inner.lower(visit)


@dataclass(frozen=True, slots=True)
class MapPut[R, P, Q](Expr[R, Q]):
    """
    Map with write-back.

    The derived value handed downstream is the very object passed to `put`,
    so in-place mutations made by the consumer reach the original part.
    """

    inner: Expr[R, P]
    get: Getter[P, Q]
    put: Putter[P, Q]

    def lower(self, receive: Consumer[Q]) -> Consumer[R]:
        get, put = self.get, self.put

        def visit(part: P) -> None:
            derived = get(part)
            receive(derived)
            put(part, derived)

        return self.inner.lower(visit)


@dataclass(frozen=True, slots=True)
class FlatMap[R, P, Q](Expr[R, Q]):
    inner: Expr[R, P]
    get: Expand[P, Q]

    def lower(self, receive: Consumer[Q]) -> Consumer[R]:
        get = self.get

        def visit(part: P) -> None:
            for nested in get(part):
                receive(nested)

        return self.inner.lower(visit)


@dataclass(frozen=True, slots=True)
class Filter[R, P](Expr[R, P]):
    inner: Expr[R, P]
    predicate: Predicate[P]

    def lower(self, receive: Consumer[P]) -> Consumer[R]:
        predicate = self.predicate

        def visit(part: P) -> None:
            if predicate(part):
                receive(part)

        return self.inner.lower(visit)


@dataclass(frozen=True, slots=True)
class Tap[R, P](Expr[R, P]):
    inner: Expr[R, P]
    effect: Consumer[P]

    def lower(self, receive: Consumer[P]) -> Consumer[R]:
        effect = self.effect

        def visit(part: P) -> None:
            effect(part)
            receive(part)

        return self.inner.lower(visit)


@dataclass(frozen=True, slots=True)
class Compose[R, P, Q](Expr[R, Q]):
    """Each part of `inner` becomes a root of `other`."""

    inner: Expr[R, P]
    other: Expr[P, Q]

    def lower(self, receive: Consumer[Q]) -> Consumer[R]:
        return self.inner.lower(self.other.lower(receive))


@dataclass(frozen=True, slots=True)
class AndAlso[R, P](Expr[R, P]):
    """All visits of `inner`, then all visits of `other`, on the same root."""

    inner: Expr[R, P]
    other: Expr[R, P]

    def lower(self, receive: Consumer[P]) -> Consumer[R]:
        first = self.inner.lower(receive)
        second = self.other.lower(receive)

        def run(root: R) -> None:
            first(root)
            second(root)

        return run


@dataclass(frozen=True, slots=True)
class Index[R, P](Expr[R, Indexed[P]]):
    """
    Pair each part with its position.

    A fresh Counter per root: nested roots of a composed traversal are
    numbered independently.
    """

    inner: Expr[R, P]

    def lower(self, receive: Consumer[Indexed[P]]) -> Consumer[R]:
        inner = self.inner

        def run(root: R) -> None:
            counter = Counter()

            def visit(part: P) -> None:
                receive(Indexed(counter.value(), part))
                counter.increment()

            inner.lower(visit)(root)

        return run


__all__ = (
    "AndAlso",
    "Compose",
    "Expr",
    "Filter",
    "FlatMap",
    "Index",
    "Map",
    "MapPut",
    "Root",
    "Tap",
)
