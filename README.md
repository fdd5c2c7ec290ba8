# buscador

`buscador` builds an in-memory index of the words in a text. For each word it
keeps the character offsets where the word occurs. Give it several words and it
finds the places where all of them appear within a short window of each other.
It then shows each such line together with the line before it and the line
after it.

## Installation

```
pip install .
```

## Command line

```
buscador BOOK.txt
buscador --lowercase BOOK.txt
buscador
```

- With a path, that file is read as UTF-8, with undecodable bytes replaced, and
  then indexed.
- Without a path, a menu lists four books: `DonQuijote.txt`,
  `la_isla_del_tesoro.txt`, `tesoro.txt` and `lobo.txt`. They are looked for in
  the current directory. If the answer is not a number from 1 to 4, the program
  prints `Opcion no valida.` and exits with status 1.
- If the file cannot be opened, the program prints `No se pudo abrir el
  archivo.` and exits with status 1.
- `--lowercase` indexes words in lower case. Query words are lowered the same
  way. Without it, matching is case-sensitive.

When indexing is done, the prompt `> Buscar palabras (o 'salir'):` asks for
words separated by spaces. The following rules apply:

- Words of three characters or fewer are ignored.
- At most ten words are used.
- If no usable word is left, the program prints
  `Error: No hay palabras válidas.`.
- Each match is printed under `--- Coincidencia encontrada ---` as numbered
  lines (`Linea N: ...`). If nothing matches, the program prints
  `No se encontraron resultados.`.
- Typing `salir`, or reaching end of input, ends the session.

## Library use

```python
from buscador.indexer import index_file
from buscador.search import search_words

index = index_file("book.txt")
for match in search_words(index, ["molino", "viento"]):
    print(match.position, match.line, match.context)
```

### `buscador.indexer`

- `index_text(text, lowercase=False, min_length=4)` returns a `BookIndex`, and
  `index_file(path, ...)` does the same for a UTF-8 file.
- Words are split on spaces, tabs, line breaks, `.,;:¡!?"'()[]{}-_`.
- Only words of at least `min_length` characters are indexed.
- Words are cut to 63 characters.
- Lines longer than 2047 characters are split into several index lines.
- `BookIndex` has these members:
  - `add_line(line, offset)`
  - `postings(word)`, which raises `KeyError` for an unknown word
  - `word in index`
  - `len(index)`, the number of distinct words
  - `line_of(position)`
  - the lists `lines` and `line_offsets`
- `iter_words(line, min_length)` yields `(start, word)` pairs, and
  `is_separator(char)` tests a single character.

### `buscador.postings`

`PostingList` stores the first position followed by the gaps between
positions, and `deltas()` returns those stored values. Iterating the list
yields absolute positions. It also has `add`, `first`, `last`, `is_empty` and
`len()`. Both `first` and `last` raise `IndexError` on an empty list.

### `buscador.search`

- `search_words(index, tokens, window=100, max_results=100)` runs a sliding
  window over the position lists of all tokens and returns `Match` objects.
  - A `Match` has three fields:
    - `position`: the smallest offset
    - `line`: a 0-based line index
    - `context`: `(line number, text)` pairs numbered from 1
  - If any token is missing from the index, the result is an empty list.
- `find_line(line_offsets, position)` maps a position to its line and raises
  `ValueError` if no line holds it.
- `context_lines(lines, line_offsets, position)` returns that line and its
  neighbours.

### `buscador.cli`

- `parse_query(text, max_tokens=10)` splits a query the way the prompt does.
- `run_session(index, text=None, stdin=None, stdout=None)` runs the interactive
  loop on any text streams.
- `main(argv=None)` is the command's entry point.

## Limitations

The index lives only in memory. It is rebuilt every time the program starts
and is never saved to disk. A session searches one book at a time. There is no
option to search all books at once.