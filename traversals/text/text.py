"""
Text - mutable character buffer
===============================

Index arithmetic used by every editing method:
- negative indices count from the end
- out-of-range indices clamp to 0 or len(text)

Editing methods take an optional `begin` / `end`:
- neither: the whole text
- `begin` only: the single character at `begin`
- both: the half-open range [begin, end)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .chars import CharFunction, CharPredicate, CharUnaryOperator

type Chars = str | Text


class Text:
    """Mutable text. All editing methods mutate in place and return self."""

    __slots__ = ("_chars",)

    def __init__(self, chars: Chars = "") -> None:
        self._chars: list[str] = list(chars)

    # Index arithmetic

    def _valid(self, index: int) -> int:
        """Normalize `index` into 0..len(self) inclusive."""
        length = len(self._chars)
        if index < 0:
            index += length
        return max(0, min(length, index))

    def _span(self, begin: int | None, end: int | None) -> tuple[int, int]:
        length = len(self._chars)
        start = 0 if begin is None else self._valid(begin)
        if end is not None:
            stop = self._valid(end)
        elif begin is not None:
            stop = min(start + 1, length)
        else:
            stop = length
        return start, max(start, stop)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"Text({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Text, str)):
            return str(self) == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def char_at(self, index: int) -> str:
        """
        Character at the normalized index.

        Raises IndexError when the index normalizes to len(self), which
        includes every index of an empty text.
        """
        return self._chars[self._valid(index)]

    def sub_sequence(self, begin: int, end: int | None = None) -> Text:
        """New text holding [begin, end), or [begin, len) without `end`."""
        stop = len(self._chars) if end is None else end
        start, stop = self._span(begin, stop)
        return Text("".join(self._chars[start:stop]))

    def copy(self) -> Text:
        return Text(self)

    # Appending

    def append(self, chars: Chars, begin: int | None = None, end: int | None = None) -> Text:
        """Append `chars`, or its slice [begin, end) normalized against `chars`."""
        if begin is None and end is None:
            self._chars.extend(chars)
            return self
        source = Text(chars)
        start, stop = source._span(0 if begin is None else begin, len(source) if end is None else end)
        self._chars.extend(source._chars[start:stop])
        return self

    def extend(self, parts: Iterable[Chars]) -> Text:
        """Append every part in order."""
        for part in parts:
            self._chars.extend(part)
        return self

    # Editing

    def insert(self, offset: int, chars: Chars) -> Text:
        """Insert `chars` after the first `offset` characters."""
        index = self._valid(offset)
        self._chars[index:index] = list(chars)
        return self

    def delete(self, begin: int | None = None, end: int | None = None) -> Text:
        start, stop = self._span(begin, end)
        del self._chars[start:stop]
        return self

    def replace(self, chars: Chars, begin: int | None = None, end: int | None = None) -> Text:
        """Replace the selected characters with `chars`."""
        start, stop = self._span(begin, end)
        self._chars[start:stop] = list(chars)
        return self

    def filter(
        self,
        predicate: CharPredicate,
        begin: int | None = None,
        end: int | None = None,
    ) -> Text:
        """Keep only selected characters satisfying `predicate`."""
        index, stop = self._span(begin, end)
        while index < stop:
            if predicate(self._chars[index]):
                index += 1
            else:
                del self._chars[index]
                stop -= 1
        return self

    def map(
        self,
        op: CharUnaryOperator,
        begin: int | None = None,
        end: int | None = None,
    ) -> Text:
        """
        Replace each selected character `c` with `op(c)`.

        `op` must return exactly one character; use flat_map for anything
        wider.
        """
        start, stop = self._span(begin, end)
        for index in range(start, stop):
            mapped = op(self._chars[index])
            if len(mapped) != 1:
                raise ValueError(f"map(): operator returned {mapped!r}, expected one character")
            self._chars[index] = mapped
        return self

    def flat_map(
        self,
        fun: CharFunction[Chars],
        begin: int | None = None,
        end: int | None = None,
    ) -> Text:
        """Replace each selected character `c` with the characters of `fun(c)`."""
        index, stop = self._span(begin, end)
        while index < stop:
            replacement = fun(self._chars[index])
            self._chars[index:index + 1] = list(replacement)
            # skip the inserted characters, move the end with them
            index += len(replacement)
            stop += len(replacement) - 1
        return self

    # Grouping

    def group(self, predicate: CharPredicate) -> list[Text]:
        """
        Split into maximal runs with constant `predicate` value.

        Groups are never empty and alternate between satisfying and failing
        `predicate`. Joining them gives back this text. An empty text has
        no groups.
        """
        groups: list[Text] = []
        current = Text()
        last = len(self._chars) - 1
        for index, char in enumerate(self._chars):
            current._chars.append(char)
            if index < last and predicate(char) != predicate(self._chars[index + 1]):
                groups.append(current)
                current = Text()
        if current._chars:
            groups.append(current)
        return groups


__all__ = ("Chars", "Text")
