"""
Log - entries recorded during one evaluation
============================================
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Consumer


class Log[A](list[A]):
    """
    Entries recorded while a traversal runs, in visit order.

    Fed through `recorder`, which is what `Traversal.tell` attaches to each
    visited part. Being a list, a Log compares equal to a list of the same
    entries.
    """

    def recorder[P](self, entry: Callable[[P], A]) -> Consumer[P]:
        """Consumer appending `entry(part)` to this log, in place."""

        def record(part: P) -> None:
            self.append(entry(part))

        return record


__all__ = ("Log",)
