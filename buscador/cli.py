"""Interactive word search over a book."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from buscador.indexer import BookIndex, index_text
from buscador.search import context_lines, search_words

MAX_TOKENS = 10
MIN_QUERY_LENGTH = 4
EXIT_WORD = "salir"

BOOKS = (
    ("Don Quijote", "DonQuijote.txt"),
    ("La isla del tesoro", "la_isla_del_tesoro.txt"),
    ("El tesoro misterioso", "tesoro.txt"),
    ("Romance de lobos", "lobo.txt"),
)


def parse_query(text: str, max_tokens: int = MAX_TOKENS) -> list[str]:
    """Split a query on spaces, keeping at most max_tokens words longer than 3 characters."""
    words = [token for token in text.split(" ") if len(token) >= MIN_QUERY_LENGTH]
    return words[:max_tokens]


def _lines_from_text(text: str, line_offsets: Sequence[int]) -> list[str]:
    ends = list(line_offsets[1:]) + [len(text)]
    return [text[start:end] for start, end in zip(line_offsets, ends)]


def run_session(index: BookIndex, text: str | None = None,
                stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Read queries until 'salir' or end of input and print every match in context.

    Context lines are cut from text when it is given, otherwise taken from
    the lines kept by the index.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    lines = index.lines if text is None else _lines_from_text(text, index.line_offsets)

    while True:
        stdout.write("\n> Buscar palabras (o 'salir'): ")
        stdout.flush()
        entry = stdin.readline()
        if not entry:
            break
        entry = entry.split("\n", 1)[0]
        if entry == EXIT_WORD:
            return

        tokens = parse_query(entry)
        if not tokens:
            stdout.write("Error: No hay palabras válidas.\n")
            continue

        matches = search_words(index, tokens)
        for match in matches:
            stdout.write("\n--- Coincidencia encontrada ---\n")
            for number, line in context_lines(lines, index.line_offsets, match.position):
                stdout.write(f"Linea {number}: {line}")
            stdout.write("\n")
        if not matches:
            stdout.write("No se encontraron resultados.\n")


def _choose_book(stdin: TextIO, stdout: TextIO) -> str | None:
    stdout.write(" --- EL BUSCADOR ---")
    stdout.write("\nSeleccione un libro: ")
    for number, (title, _) in enumerate(BOOKS, start=1):
        stdout.write(f"\n{number}. {title} ")
    stdout.write("\nIngrese el numero correspondiente: ")
    stdout.flush()
    answer = stdin.readline().strip()
    try:
        option = int(answer)
    except ValueError:
        return None
    if 1 <= option <= len(BOOKS):
        return BOOKS[option - 1][1]
    return None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="buscador",
                                     description="Search words that appear close together in a book.")
    parser.add_argument("path", nargs="?", help="text file to search; asks from a menu if left out")
    parser.add_argument("--lowercase", action="store_true",
                        help="index words in lower case")
    args = parser.parse_args(argv)

    path = args.path
    if path is None:
        path = _choose_book(sys.stdin, sys.stdout)
        if path is None:
            print("Opcion no valida.")
            return 1

    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        print("No se pudo abrir el archivo.")
        return 1

    index = index_text(text, lowercase=args.lowercase)
    sys.stdout.write("Se indexo el archivo")
    run_session(index, text, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())