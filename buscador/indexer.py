"""Build a word index of a text: word -> positions, plus line offsets."""

from __future__ import annotations

import bisect
import os
import re
from typing import Iterator

from buscador.postings import PostingList

SEPARATORS = " \n\r\t.,;:¡!?\"'()[]{}-_"
LINE_MAX = 2048
MAX_LINE_CHUNK = LINE_MAX - 1
MAX_WORD_LENGTH = 63
DEFAULT_MIN_LENGTH = 4

_SEPARATOR_SET = frozenset(SEPARATORS)
_WORD_RE = re.compile("[^" + re.escape(SEPARATORS) + "]+")


def is_separator(char: str) -> bool:
    """Return True if the character splits words."""
    return char in _SEPARATOR_SET


def iter_words(line: str, min_length: int = DEFAULT_MIN_LENGTH) -> Iterator[tuple[int, str]]:
    """Yield (start, word) for each word of at least min_length characters.

    Words longer than MAX_WORD_LENGTH are cut to that length.
    """
    for match in _WORD_RE.finditer(line):
        word = match.group()
        if len(word) >= min_length:
            yield match.start(), word[:MAX_WORD_LENGTH]


class BookIndex:
    """Positions of every indexed word and the start offset of every line."""

    def __init__(self, lowercase: bool = False, min_length: int = DEFAULT_MIN_LENGTH) -> None:
        self.lowercase = lowercase
        self.min_length = min_length
        self.lines: list[str] = []
        self.line_offsets: list[int] = []
        self._postings: dict[str, PostingList] = {}

    def _normalize(self, word: str) -> str:
        word = word[:MAX_WORD_LENGTH]
        return word.lower() if self.lowercase else word

    def add_line(self, line: str, offset: int) -> None:
        """Record a line starting at offset and index its words."""
        self.lines.append(line)
        self.line_offsets.append(offset)
        for start, word in iter_words(line, self.min_length):
            key = self._normalize(word)
            postings = self._postings.get(key)
            if postings is None:
                postings = self._postings[key] = PostingList()
            postings.add(offset + start)

    def postings(self, word: str) -> PostingList:
        """Return the positions of word; raise KeyError if it never occurs."""
        return self._postings[self._normalize(word)]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._normalize(word) in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    def line_of(self, position: int) -> int:
        """Return the index of the line holding position."""
        line = bisect.bisect_right(self.line_offsets, position) - 1
        if line < 0:
            raise ValueError(f"no line holds position {position}")
        return line


def _split_lines(text: str) -> Iterator[str]:
    for line in text.splitlines(keepends=True):
        for start in range(0, len(line), MAX_LINE_CHUNK):
            yield line[start:start + MAX_LINE_CHUNK]


def index_text(text: str, lowercase: bool = False,
               min_length: int = DEFAULT_MIN_LENGTH) -> BookIndex:
    """Index a whole text held in memory."""
    index = BookIndex(lowercase=lowercase, min_length=min_length)
    offset = 0
    for line in _split_lines(text):
        index.add_line(line, offset)
        offset += len(line)
    return index


def index_file(path: str | os.PathLike[str], lowercase: bool = False,
               min_length: int = DEFAULT_MIN_LENGTH) -> BookIndex:
    """Read and index a text file."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        text = handle.read()
    return index_text(text, lowercase=lowercase, min_length=min_length)