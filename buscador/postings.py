"""Delta-encoded list of word positions inside a text."""

from __future__ import annotations

from typing import Iterator


class PostingList:
    """Ordered positions of one word, kept as a start position plus deltas.

    The first stored value is an absolute position. Each later value is the
    distance from the position before it, so iterating yields the absolute
    positions again.
    """

    def __init__(self) -> None:
        self._values: list[int] = []
        self._last: int | None = None

    def add(self, position: int) -> None:
        """Append an absolute position to the end of the list."""
        if self._last is None:
            self._values.append(position)
        else:
            self._values.append(position - self._last)
        self._last = position

    def first(self) -> int:
        """Return the first absolute position."""
        if not self._values:
            raise IndexError("posting list is empty")
        return self._values[0]

    def last(self) -> int:
        """Return the last absolute position."""
        if self._last is None:
            raise IndexError("posting list is empty")
        return self._last

    def is_empty(self) -> bool:
        return not self._values

    def deltas(self) -> list[int]:
        """Return the stored values: the first position, then the gaps."""
        return list(self._values)

    def __iter__(self) -> Iterator[int]:
        position = 0
        for value in self._values:
            position += value
            yield position

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PostingList({list(self)!r})"