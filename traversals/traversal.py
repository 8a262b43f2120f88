"""
Fluent traversal builder.

A Traversal[R, P] describes how to visit zero or more parts P inside a root
R. It is built once from combinators and replayed against any root:

    centers = shapes_of_image().compose(center_of_shape())
    list(centers.parts_of(image))                      # read
    centers.traverse(image, lambda c: c.add(offset))   # write through put

Every combinator returns a new Traversal wrapping a new AST node; nothing is
evaluated until a root is supplied.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from kungfu import Result

from ._errors import PartCountError
from ._helpers import index_is, index_is_not
from ._types import Consumer, Expand, Getter, IndexPredicate, Predicate, Putter
from .ast import AndAlso, Compose, Expr, Filter, FlatMap, Index, Map, MapPut, Root, Tap
from .indexed import Indexed
from .writer import Log, WriterResult


@dataclass(frozen=True, slots=True)
class Traversal[R, P]:
    """
    Composable, reusable description of parts inside a root.

    Immutable and free of evaluation state: one value can be shared and
    evaluated any number of times.
    """

    expr: Expr[R, P]

    # Continuation-passing view

    def __call__(self, receive: Consumer[P]) -> Consumer[R]:
        """Turn a consumer of parts into a consumer of roots."""
        return self.expr.lower(receive)

    # Combinators

    @typing.overload
    def map[Q](self, get: Getter[P, Q]) -> Traversal[R, Q]: ...

    @typing.overload
    def map[Q](self, get: Getter[P, Q], put: Putter[P, Q]) -> Traversal[R, Q]: ...

    def map[Q](self, get: Getter[P, Q], put: Putter[P, Q] | None = None) -> Traversal[R, Q]:
        """
        Traverse `get(p)` instead of each part `p`.

        With `put`, the derived value is written back after the downstream
        consumer has handled it: `put(p, q)` runs exactly once per part.
        """
        if put is None:
            return Traversal(Map(self.expr, get=get))
        return Traversal(MapPut(self.expr, get=get, put=put))

    def flat_map[Q](self, get: Expand[P, Q]) -> Traversal[R, Q]:
        """Traverse every element of `get(p)`, in iteration order."""
        return Traversal(FlatMap(self.expr, get=get))

    def filter(self, predicate: Predicate[P]) -> Traversal[R, P]:
        """Skip parts failing `predicate`."""
        return Traversal(Filter(self.expr, predicate=predicate))

    def compose[Q](self, other: Traversal[P, Q]) -> Traversal[R, Q]:
        """Traverse each part of this traversal with `other`."""
        return Traversal(Compose(self.expr, other=other.expr))

    def and_also(self, other: Traversal[R, P]) -> Traversal[R, P]:
        """Traverse all parts of this traversal, then all parts of `other`."""
        return Traversal(AndAlso(self.expr, other=other.expr))

    def indexed(self) -> Traversal[R, Indexed[P]]:
        """Pair each part with its 0-based position within the evaluation."""
        return Traversal(Index(self.expr))

    def only_at(self, where: int | IndexPredicate) -> Traversal[R, P]:
        """Keep the part at index `where`, or parts whose index satisfies it."""
        if isinstance(where, int):
            where = index_is(where)
        accept = where
        return (
            self.indexed()
            .filter(lambda ip: accept(ip.index))
            .map(lambda ip: ip.value)
        )

    def except_at(self, index: int) -> Traversal[R, P]:
        """Keep every part except the one at `index`."""
        return self.only_at(index_is_not(index))

    def tap(self, effect: Consumer[P]) -> Traversal[R, P]:
        """Run `effect` on each part before passing it on unchanged."""
        return Traversal(Tap(self.expr, effect=effect))

    def tell(self, log: Log[str], *, entry: Callable[[P], str] = repr) -> Traversal[R, P]:
        """Record `entry(p)` in `log` for each visited part."""
        return self.tap(log.recorder(entry))

    # Materialization

    def traverse(self, root: R, action: Consumer[P]) -> None:
        from .materialize import traverse
        traverse(self, root, action)

    def parts_of(self, root: R) -> Iterator[P]:
        from .materialize import parts_of
        return parts_of(self, root)

    def collect(self, root: R) -> list[P]:
        from .materialize import collect
        return collect(self, root)

    def count(self, root: R) -> int:
        from .materialize import count
        return count(self, root)

    def first(self, root: R) -> P | None:
        from .materialize import first
        return first(self, root)

    def single(self, root: R) -> Result[P, PartCountError]:
        from .materialize import single
        return single(self, root)

    def catching[E](
        self,
        root: R,
        action: Consumer[P],
        *,
        on_error: Callable[[Exception], E],
    ) -> Result[int, E]:
        from .materialize import catching
        return catching(self, root, action, on_error=on_error)

    def traverse_w(
        self,
        root: R,
        action: Consumer[P],
        *,
        entry: Callable[[P], str] = repr,
    ) -> WriterResult[Exception]:
        from .materialize import traverse_w
        return traverse_w(self, root, action, entry=entry)


def identity_for[T](tp: type[T] = object) -> Traversal[T, T]:
    """
    Traversal whose single part is the root itself.

    The seed for every traversal of a concrete root type:

        identity_for(Image).flat_map(lambda image: image.shapes)

    Never inspects the root, so `None` roots yield exactly one part too.
    `tp` must be a class; for a type alias or a union, omit it and annotate
    the result instead:

        shapes: Traversal[Shape, Shape] = identity_for()
    """
    _ = tp  # Used only for type inference
    return Traversal(Root())


__all__ = ("Traversal", "identity_for")
