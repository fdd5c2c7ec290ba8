"""Proximity search over a BookIndex: find places where all words appear close together."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from buscador.indexer import BookIndex

DEFAULT_WINDOW = 100
MAX_RESULTS = 100


@dataclass(frozen=True)
class Match:
    """A place in the text where every searched word falls inside the window."""

    position: int
    line: int
    context: tuple[tuple[int, str], ...] = field(default=())


@dataclass
class _Cursor:
    position: int
    word_id: int
    rest: Iterator[int]


def find_line(line_offsets: Sequence[int], position: int) -> int:
    """Return the index of the line that holds position.

    line_offsets must be sorted. Raise ValueError if no line holds it.
    """
    line = bisect.bisect_right(line_offsets, position) - 1
    if line < 0:
        raise ValueError(f"no line holds position {position}")
    return line


def context_lines(lines: Sequence[str], line_offsets: Sequence[int],
                  position: int) -> list[tuple[int, str]]:
    """Return the line holding position and its neighbours as (number, text).

    Line numbers start at 1.
    """
    line = find_line(line_offsets, position)
    first = max(line - 1, 0)
    last = min(line + 1, len(lines) - 1)
    return [(number + 1, lines[number]) for number in range(first, last + 1)]


def search_words(index: BookIndex, tokens: Sequence[str],
                 window: int = DEFAULT_WINDOW,
                 max_results: int = MAX_RESULTS) -> list[Match]:
    """Find positions where all tokens occur within window characters.

    A sliding window over the sorted position lists of every token: the
    smallest current position is compared with the largest, then the list
    that held the smallest one is advanced. Returns an empty list if any
    token is missing from the index.
    """
    if not tokens:
        return []
    cursors: list[_Cursor] = []
    for word_id, token in enumerate(tokens):
        if token not in index:
            return []
        rest = iter(index.postings(token))
        cursors.append(_Cursor(next(rest), word_id, rest))

    matches: list[Match] = []
    while len(matches) < max_results:
        cursors.sort(key=lambda cursor: cursor.position)
        low = cursors[0].position
        high = cursors[-1].position
        if high - low <= window:
            line = find_line(index.line_offsets, low)
            context = context_lines(index.lines, index.line_offsets, low)
            matches.append(Match(low, line, tuple(context)))
        try:
            cursors[0].position = next(cursors[0].rest)
        except StopIteration:
            break
    return matches