# fillit

`fillit` reads a file of up to 26 tetrominoes and finds the smallest square that
holds all of them. Pieces are placed in the order they appear in the file and are
labelled `A`, `B`, `C` and so on. In the printed square, `.` marks an empty cell.

## Installing

```
pip install .
```

## Input format

Each piece is written as four lines of four characters. `#` marks a filled square
and `.` an empty one, and every line ends with a newline. One extra character
follows each piece except the last; normally this is a newline, which leaves an
empty line between pieces. That separator character is not checked. The text must
end right after the last piece.

A piece must have exactly four `#` squares, and they must join edge to edge into
one tetromino. The file may not contain more than 26 pieces.

```
....
.##.
.##.
....

#...
#...
#...
#...
```

## Command line

```
fillit pieces.txt
```

For the example above, it prints:

```
AAB.
AAB.
..B.
..B.
```

If the file cannot be read or its contents are invalid, the command prints `error`
and exits with status 1. If it is not given exactly one argument, it prints
`usage: fillit input_file` and exits with status 1.

## Library use

```python
from fillit.tetromino import parse_pieces
from fillit.solver import solve

pieces = parse_pieces("....\n.##.\n.##.\n....\n")
solution = solve(pieces)
print(solution.render(), end="")
```

`fillit.tetromino` holds the piece functions:

- `read_pieces(path)` reads a file and parses it.
- `parse_pieces(data)` parses `str` or `bytes` already in memory.
- `validate_block(block)` checks a single 20-character piece description.

Each of these raises `InvalidInputError`, a subclass of `ValueError`, when the input
is malformed. `Tetromino.from_block(block, letter)` builds a piece that has been
moved to the top-left corner of its grid. `Tetromino.cells()` returns the piece's
squares as `(row, column)` pairs.

`fillit.solver` holds the solving functions:

- `minimum_size(count)` gives the smallest side worth trying. It is at least 2,
  and its square has room for `count` pieces.
- `place(pieces, size)` tries one square size. It returns a `Solution`, or `None`
  when the pieces do not fit.
- `solve(pieces)` starts at the minimum size and grows the square until every
  piece fits.

A `Solution` has a `size` and a tuple of `placements` of the form
`(piece, row, column)`. Its `render()` method returns the square as text.

## Helper modules

- `fillit.chars`: ASCII tests and case mapping. It has `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`, `to_upper` and `to_lower`. Each
  takes a one-character string or an integer code.
- `fillit.conversion`: `atoi(text)` parses a leading integer, with results that
  wrap like a 32-bit signed int. `itoa(n)` formats an integer as text.
- `fillit.memory`: operations on `bytearray` buffers. It has `memset`, `bzero`,
  `memcpy`, `memccpy`, `memmove`, `memchr`, `memcmp` and `memalloc`.
- `fillit.search`: `strlen`, `strchr`, `strrchr`, `strstr`, `strnstr`, `strcmp`,
  `strncmp`, `strequ` and `strnequ`. These treat text as ending at the first NUL
  character, and a failed search returns `None`.
- `fillit.transform`: `strncpy`, `strncat`, `strlcat`, `striter`, `striteri`,
  `strmap`, `strmapi`, `strsub`, `strjoin`, `strtrim` and `strsplit`. Each returns
  a new string.
- `fillit.output`: `putchar`, `putstr`, `putendl` and `putnbr` write to a text
  stream, which is standard output by default.
- `fillit.linked`: `LinkedList` is a singly linked list of `Node` objects. It has
  `push`, `pop`, `clear`, `for_each` and `map`, and supports iteration and `len()`.