"""Tetromino pieces and the text format that describes them.

A piece is written as four lines of four characters, ``#`` for a filled
square and ``.`` for an empty one, each line ending in a newline. Pieces in
a file are separated by one extra character, normally an empty line.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Set, Tuple, Union

MAX_PIECES = 26
GRID = 4
BLOCK_LENGTH = GRID * (GRID + 1)

_LINE = GRID + 1
_SEPARATED_LENGTH = BLOCK_LENGTH + 1
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))
# A connected tetromino has 3 shared edges (6 contacts), the square has 4.
_CONTACTS = (6, 8)


class InvalidInputError(ValueError):
    """Raised when input text does not describe a valid list of tetrominoes."""


def _filled(block: str) -> Set[Tuple[int, int]]:
    return {divmod(index, _LINE) for index, ch in enumerate(block) if ch == "#"}


def validate_block(block: str) -> None:
    """Check one 20-character piece description, raising InvalidInputError if bad."""
    if not isinstance(block, str):
        raise TypeError(f"expected str, got {type(block).__name__}")
    if len(block) != BLOCK_LENGTH:
        raise InvalidInputError(
            f"a piece must be {BLOCK_LENGTH} characters long, got {len(block)}"
        )
    for index, ch in enumerate(block):
        row, col = divmod(index, _LINE)
        if col == GRID:
            if ch != "\n":
                raise InvalidInputError(f"line {row + 1} does not end with a newline")
        elif ch not in "#.":
            raise InvalidInputError(
                f"unexpected character {ch!r} at line {row + 1}, column {col + 1}"
            )
    cells = _filled(block)
    if len(cells) != 4:
        raise InvalidInputError(f"a piece needs exactly 4 squares, got {len(cells)}")
    contacts = sum(
        (row + dr, col + dc) in cells for row, col in cells for dr, dc in _NEIGHBOURS
    )
    if contacts not in _CONTACTS:
        raise InvalidInputError("the squares do not form a tetromino")


@dataclass(frozen=True)
class Tetromino:
    """A piece moved to the top-left corner of its 4x4 grid.

    ``mask`` holds the squares as bits, the square at (row, column) being
    bit ``4 * row + column``. ``width`` and ``height`` are the size of the
    piece's bounding box.
    """

    letter: str
    mask: int
    width: int
    height: int

    @classmethod
    def from_block(cls, block: str, letter: str) -> "Tetromino":
        """Build a piece from its 20-character description."""
        validate_block(block)
        if not isinstance(letter, str) or len(letter) != 1:
            raise ValueError(f"letter must be a single character, got {letter!r}")
        cells = _filled(block)
        top = min(row for row, _ in cells)
        left = min(col for _, col in cells)
        mask = sum(1 << ((row - top) * GRID + (col - left)) for row, col in cells)
        width = max(col for _, col in cells) - left + 1
        height = max(row for row, _ in cells) - top + 1
        return cls(letter, mask, width, height)

    def cells(self) -> Tuple[Tuple[int, int], ...]:
        """The (row, column) of each square, in reading order."""
        return tuple(
            divmod(bit, GRID) for bit in range(GRID * GRID) if self.mask >> bit & 1
        )


def parse_pieces(data: Union[str, bytes]) -> List[Tetromino]:
    """Parse a whole input text into pieces lettered from ``A``.

    The character that follows each piece is not inspected; the text must
    end right after the last piece, and at most 26 pieces are allowed.
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")
    pieces: List[Tetromino] = []
    offset = 0
    while True:
        chunk = data[offset:offset + _SEPARATED_LENGTH]
        if len(chunk) < BLOCK_LENGTH:
            raise InvalidInputError("incomplete piece" if chunk else "missing piece")
        if len(pieces) == MAX_PIECES:
            raise InvalidInputError(f"more than {MAX_PIECES} pieces")
        letter = chr(ord("A") + len(pieces))
        pieces.append(Tetromino.from_block(chunk[:BLOCK_LENGTH], letter))
        if len(chunk) == BLOCK_LENGTH:
            return pieces
        offset += _SEPARATED_LENGTH


def read_pieces(path: Union[str, os.PathLike]) -> List[Tetromino]:
    """Read and parse the pieces stored in a file."""
    return parse_pieces(Path(path).read_bytes())