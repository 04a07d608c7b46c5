"""Command line entry point: read a file of pieces and print the smallest square."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from fillit.output import putendl, putstr
from fillit.solver import solve
from fillit.tetromino import InvalidInputError, read_pieces

USAGE = "usage: fillit input_file"
ERROR = "error"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        putendl(USAGE)
        return 1
    try:
        pieces = read_pieces(args[0])
    except (OSError, InvalidInputError):
        putendl(ERROR)
        return 1
    putstr(solve(pieces).render())
    return 0


if __name__ == "__main__":
    sys.exit(main())