"""Fitting tetrominoes into the smallest square."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from fillit.tetromino import Tetromino

Placement = Tuple[Tetromino, int, int]


@dataclass(frozen=True)
class Solution:
    """Pieces placed in a square; each placement is (piece, row, column)."""

    size: int
    placements: Tuple[Placement, ...]

    def render(self) -> str:
        """The square as lines of letters and dots, each ending in a newline."""
        grid = [["."] * self.size for _ in range(self.size)]
        for piece, row, col in self.placements:
            for r, c in piece.cells():
                grid[row + r][col + c] = piece.letter
        return "".join("".join(line) + "\n" for line in grid)


def minimum_size(count: int) -> int:
    """Smallest side, at least 2, of a square with room for ``count`` pieces."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    size = 2
    while size * size < count * 4:
        size += 1
    return size


def _shape(piece: Tetromino, size: int) -> int:
    return sum(1 << (row * size + col) for row, col in piece.cells())


def place(pieces: Iterable[Tetromino], size: int) -> Optional[Solution]:
    """Fit every piece, in order, into a square of side ``size``.

    Each piece takes the first free position, row by row and then column by
    column; on a dead end the search backs up. Returns None if no
    arrangement fits.
    """
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    ordered: Sequence[Tetromino] = list(pieces)
    shapes = [_shape(piece, size) for piece in ordered]
    positions: List[Tuple[int, int]] = [(0, 0)] * len(ordered)

    def fit(index: int, board: int) -> bool:
        if index == len(ordered):
            return True
        piece = ordered[index]
        for row in range(size - piece.height + 1):
            for col in range(size - piece.width + 1):
                placed = shapes[index] << (row * size + col)
                if board & placed:
                    continue
                positions[index] = (row, col)
                if fit(index + 1, board | placed):
                    return True
        return False

    if not fit(0, 0):
        return None
    return Solution(
        size,
        tuple((piece, row, col) for piece, (row, col) in zip(ordered, positions)),
    )


def solve(pieces: Iterable[Tetromino]) -> Solution:
    """Arrange the pieces in the smallest square that holds them all."""
    ordered = list(pieces)
    size = minimum_size(len(ordered))
    while True:
        solution = place(ordered, size)
        if solution is not None:
            return solution
        size += 1