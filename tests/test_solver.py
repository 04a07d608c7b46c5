from collections import Counter

import pytest

from fillit.solver import Solution, minimum_size, place, solve
from fillit.tetromino import parse_pieces


def block(*rows):
    rows = list(rows) + ["...."] * (4 - len(rows))
    return "".join(row + "\n" for row in rows)


SQUARE = block("##..", "##..")
LINE = block("####")
MIXED = [
    block(".#..", "###."),
    block("#...", "#...", "##.."),
    block(".##.", "##.."),
    LINE,
    SQUARE,
    block("#...", "#...", "#...", "#..."),
]


def pieces_of(*blocks):
    return parse_pieces("\n".join(blocks))


def absolute_cells(solution):
    for piece, row, col in solution.placements:
        for r, c in piece.cells():
            yield piece.letter, row + r, col + c


def check_valid(solution, pieces):
    cells = list(absolute_cells(solution))
    assert len(cells) == 4 * len(pieces)
    assert len({(r, c) for _, r, c in cells}) == len(cells)
    assert all(0 <= r < solution.size and 0 <= c < solution.size for _, r, c in cells)
    assert [p for p, _, _ in solution.placements] == pieces


@pytest.mark.parametrize("count", range(0, 27))
def test_minimum_size_is_smallest_square_with_room(count):
    size = minimum_size(count)
    assert size >= 2
    assert size * size >= 4 * count
    assert size == 2 or (size - 1) * (size - 1) < 4 * count


def test_minimum_size_rejects_negative():
    with pytest.raises(ValueError):
        minimum_size(-1)


def test_single_square():
    solution = solve(pieces_of(SQUARE))
    assert solution.render() == "AA\nAA\n"


def test_four_squares():
    solution = solve(pieces_of(SQUARE, SQUARE, SQUARE, SQUARE))
    assert solution.render() == "AABB\nAABB\nCCDD\nCCDD\n"


def test_first_piece_goes_to_top_left():
    solution = solve(pieces_of(block(".#..", "###."), SQUARE))
    _, row, col = solution.placements[0]
    assert (row, col) == (0, 0)


def test_place_returns_none_when_piece_is_too_wide():
    assert place(pieces_of(LINE), minimum_size(1)) is None


def test_place_rejects_non_positive_size():
    with pytest.raises(ValueError):
        place(pieces_of(SQUARE), 0)


def test_place_result_is_valid():
    pieces = pieces_of(*MIXED)
    solution = place(pieces, 6)
    assert solution is not None
    assert solution.size == 6
    check_valid(solution, pieces)


def test_solve_is_valid_and_minimal():
    pieces = pieces_of(*MIXED)
    solution = solve(pieces)
    check_valid(solution, pieces)
    assert solution.size >= minimum_size(len(pieces))
    if solution.size > minimum_size(len(pieces)):
        assert place(pieces, solution.size - 1) is None


def test_solve_grows_past_minimum_when_needed():
    pieces = pieces_of(LINE)
    solution = solve(pieces)
    assert solution.size > minimum_size(1)
    assert place(pieces, solution.size - 1) is None
    check_valid(solution, pieces)


def test_render_shape_and_letter_counts():
    pieces = pieces_of(*MIXED)
    solution = solve(pieces)
    text = solution.render()
    lines = text.split("\n")
    assert lines[-1] == ""
    assert len(lines[:-1]) == solution.size
    assert all(len(line) == solution.size for line in lines[:-1])
    counts = Counter(text.replace("\n", ""))
    assert all(counts[p.letter] == 4 for p in pieces)
    assert counts["."] == solution.size ** 2 - 4 * len(pieces)


def test_render_matches_placements():
    solution = solve(pieces_of(*MIXED[:3]))
    lines = solution.render().split("\n")
    for letter, row, col in absolute_cells(solution):
        assert lines[row][col] == letter


def test_empty_solution_renders_dots():
    solution = Solution(3, ())
    assert solution.render() == ("." * 3 + "\n") * 3