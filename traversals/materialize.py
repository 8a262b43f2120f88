"""
Materialization
===============

Running a traversal against a concrete root.

- traverse / parts_of: the two primitive ways to evaluate
- collect / count / first / single: eager conveniences over parts_of
- catching / traverse_w: lift exception-based failures of caller
  functions into Result (and WriterResult) values
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator

from kungfu import Error, Ok, Result

from ._errors import PartCountError
from ._helpers import identity
from ._types import Consumer
from .writer import Log, WriterResult

if typing.TYPE_CHECKING:
    from .traversal import Traversal


def traverse[R, P](traversal: Traversal[R, P], root: R, action: Consumer[P]) -> None:
    """
    Invoke `action` once per part, in traversal order.

    Write-backs happen during the call: when it returns, the root reflects
    every mutation. Exceptions from caller functions propagate unchanged and
    leave already applied write-backs in place.
    """
    traversal(action)(root)


def parts_of[R, P](traversal: Traversal[R, P], root: R) -> Iterator[P]:
    """
    Lazily yield the parts `traverse` would visit.

    Nothing runs until iteration starts; each call evaluates afresh.
    """
    parts: list[P] = []
    traverse(traversal, root, parts.append)
    yield from parts


def collect[R, P](traversal: Traversal[R, P], root: R) -> list[P]:
    """All parts, eagerly, in order."""
    return list(parts_of(traversal, root))


def count[R, P](traversal: Traversal[R, P], root: R) -> int:
    """Number of visited parts."""
    visits = 0

    def visit(part: P) -> None:
        nonlocal visits
        _ = part
        visits += 1

    traverse(traversal, root, visit)
    return visits


def first[R, P](traversal: Traversal[R, P], root: R) -> P | None:
    """
    First part, or None when nothing is visited.

    NOTE: The whole traversal still runs; a None part is indistinguishable
          from no part. Use single() when that matters.
    """
    return next(parts_of(traversal, root), None)


def single[R, P](traversal: Traversal[R, P], root: R) -> Result[P, PartCountError]:
    """Ok(part) if exactly one part is visited, Error(PartCountError) otherwise."""
    parts = collect(traversal, root)
    if len(parts) == 1:
        return Ok(parts[0])
    return Error(PartCountError(len(parts)))


def catching[R, P, E](
    traversal: Traversal[R, P],
    root: R,
    action: Consumer[P],
    *,
    on_error: Callable[[Exception], E],
) -> Result[int, E]:
    """
    Traverse, converting a raised exception into Error(on_error(exc)).

    **When to use:** Bridge between exception-raising getters, putters or
    actions and Result-based code.

    Example:
        ages = identity_for(Text).compose(groups(",")).map(str).map(int)
        ages.catching(text, print, on_error=lambda e: BadRow(str(e)))

    Returns Ok(number of completed actions). There is no rollback: on Error
    the root keeps whatever write-backs finished before the failure.

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """
    visits = 0

    def visit(part: P) -> None:
        nonlocal visits
        action(part)
        visits += 1

    try:
        traverse(traversal, root, visit)
    except Exception as exc:
        return Error(on_error(exc))
    return Ok(visits)


def traverse_w[R, P](
    traversal: Traversal[R, P],
    root: R,
    action: Consumer[P],
    *,
    entry: Callable[[P], str] = repr,
) -> WriterResult[Exception]:
    """
    Logged traverse: like catching(), plus one log entry per visited part.

    The entry is recorded before `action` runs, so on failure the last
    entry names the part that was being handled.
    """
    log: Log[str] = Log()
    result = catching(traversal.tell(log, entry=entry), root, action, on_error=identity)
    return WriterResult(result, log)


__all__ = (
    "catching",
    "collect",
    "count",
    "first",
    "parts_of",
    "single",
    "traverse",
    "traverse_w",
)
