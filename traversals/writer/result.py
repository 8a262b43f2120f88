"""
WriterResult - outcome of a logged traversal
============================================
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Ok, Result

from .log import Log


@dataclass(frozen=True, slots=True)
class WriterResult[E]:
    """
    Outcome of `traverse_w`.

    - result: Ok(number of completed actions), or Error(what stopped the
      traversal)
    - log: one entry per part that reached the action, the failing one
      included

    Match on it directly:

        match ids.traverse_w(table, action):
            case WriterResult(Ok(visits), log): ...
            case WriterResult(Error(exc), log): ...
    """

    result: Result[int, E]
    log: Log[str]

    @property
    def visits(self) -> int | None:
        """Completed actions, or None when the traversal stopped on an error."""
        match self.result:
            case Ok(visits):
                return visits
            case _:
                return None


__all__ = ("WriterResult",)
