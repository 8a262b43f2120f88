"""
Indexed parts
=============

Transient carriers used while a traversal tracks visitation positions.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Indexed[P]:
    """
    A part paired with its 0-based position within one evaluation.

    Never stored in permanent data: produced by `Traversal.indexed()` and
    unwrapped again by `only_at` / `except_at`.
    """

    index: int
    value: P


class Counter:
    """
    Monotonic counter starting at zero.

    One counter per evaluation. Not thread-safe, never shared.
    """

    __slots__ = ("_count",)

    def __init__(self) -> None:
        self._count = 0

    def value(self) -> int:
        """Current count."""
        return self._count

    def increment(self) -> Counter:
        """Advance by one. Returns self for chaining."""
        self._count += 1
        return self

    def __repr__(self) -> str:
        return f"Counter({self._count})"


__all__ = ("Counter", "Indexed")
