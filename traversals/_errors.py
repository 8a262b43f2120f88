from __future__ import annotations

class PartCountError(Exception):
    """Traversal did not visit exactly one part."""

    count: int

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected exactly one part, found {count}")

__all__ = ("PartCountError",)
