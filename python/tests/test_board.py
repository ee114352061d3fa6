"""Board model tests: heuristics, successors, twins and moves."""

from __future__ import annotations

import random

import pytest

from conftest import GOAL_3x3, board3
from tilesolver.engine.generator import BoardGenerator
from tilesolver.errors import InvalidBoardError
from tilesolver.models.board import Board, Direction


def _sample_boards(count: int = 40) -> list[Board]:
    """Random reachable 3×3 positions, plus the goal itself."""
    rng = random.Random(1234)
    start = Board(current=GOAL_3x3, goal=GOAL_3x3)
    return [start] + [
        BoardGenerator.scramble(start, rng.randint(1, 30), rng) for _ in range(count)
    ]


def _diff(a: Board, b: Board) -> list[tuple[int, int]]:
    return [
        (r, c)
        for r in range(a.rows)
        for c in range(a.cols)
        if a.tile(r, c) != b.tile(r, c)
    ]


# -- construction -------------------------------------------------------------


def test_grids_are_copied() -> None:
    current = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    board = Board(current=current, goal=[list(row) for row in GOAL_3x3])
    current[0][0] = 99

    assert board.tile(0, 0) == 1
    assert board.current == ((1, 2, 3), (4, 5, 6), (7, 0, 8))
    assert board.blank_pos == (2, 1)


def test_from_flat_builds_rectangular_boards() -> None:
    board = Board.from_flat(2, [1, 2, 3, 4, 0, 5], [1, 2, 3, 4, 5, 0], cols=3)

    assert (board.rows, board.cols) == (2, 3)
    assert board.current == ((1, 2, 3), (4, 0, 5))


@pytest.mark.parametrize(
    "current, goal",
    [
        ([[1, 2], [3]], [[1, 2], [3, 0]]),
        ([[1, 2], [3, 0]], [[1, 2, 3], [4, 5, 0]]),
        ([], []),
    ],
    ids=["ragged", "shape-mismatch", "empty"],
)
def test_malformed_grids_are_rejected(current, goal) -> None:
    with pytest.raises(InvalidBoardError):
        Board(current=current, goal=goal)


def test_from_flat_rejects_wrong_tile_count() -> None:
    with pytest.raises(InvalidBoardError, match="Expected 9 tiles"):
        Board.from_flat(3, [1, 2, 3], list(range(9)))


# -- equality -----------------------------------------------------------------


def test_equality_ignores_the_goal() -> None:
    other_goal = ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    a = board3("1 2 3 4 5 6 7 0 8")
    b = board3("1 2 3 4 5 6 7 0 8", goal=other_goal)

    assert a == b
    assert a.equals(b)
    assert hash(a) == hash(b)
    assert a != board3("1 2 3 4 5 6 0 7 8")
    assert not a.equals("1 2 3 4 5 6 7 0 8")


# -- heuristics ---------------------------------------------------------------


@pytest.mark.parametrize(
    "flat, misplaced, manhattan",
    [
        ("1 2 3 4 5 6 7 8 0", 0, 0),
        ("1 2 3 4 5 6 7 0 8", 1, 1),
        ("8 1 3 4 0 2 7 6 5", 5, 10),
        ("2 1 3 4 5 6 7 8 0", 2, 2),
        ("0 8 7 6 5 4 3 2 1", 7, 20),
    ],
)
def test_heuristic_values(flat: str, misplaced: int, manhattan: int) -> None:
    board = board3(flat)

    assert board.misplaced_tiles() == misplaced
    assert board.manhattan_distance() == manhattan


def test_manhattan_uses_true_column_distance_on_wide_boards() -> None:
    board = Board(current=((1, 2, 3), (0, 4, 5)), goal=((1, 2, 3), (4, 5, 0)))

    assert board.manhattan_distance() == 2


def test_manhattan_respects_a_custom_goal() -> None:
    goal = ((0, 1, 2), (3, 4, 5), (6, 7, 8))

    assert board3("1 0 2 3 4 5 6 7 8", goal=goal).manhattan_distance() == 1
    assert board3("3 1 2 0 4 5 6 7 8", goal=goal).manhattan_distance() == 1


def test_value_missing_from_goal_scores_against_the_origin() -> None:
    board = Board(current=((9, 1), (2, 0)), goal=((1, 2), (3, 0)))

    assert board.goal_position(9) == (0, 0)
    assert board.manhattan_distance() == 3
    assert not board.is_goal()


@pytest.mark.parametrize("board", _sample_boards())
def test_goal_iff_no_misplaced_tiles(board: Board) -> None:
    assert board.is_goal() == (board.misplaced_tiles() == 0)


# -- successors ---------------------------------------------------------------


def test_neighbors_order_is_left_right_up_down() -> None:
    board = board3("1 2 3 4 0 5 6 7 8")

    assert board.neighbors() == [
        board3("1 2 3 0 4 5 6 7 8"),
        board3("1 2 3 4 5 0 6 7 8"),
        board3("1 0 3 4 2 5 6 7 8"),
        board3("1 2 3 4 7 5 6 0 8"),
    ]


@pytest.mark.parametrize(
    "flat, count",
    [
        ("0 1 2 3 4 5 6 7 8", 2),
        ("1 2 3 4 5 6 7 8 0", 2),
        ("1 0 2 3 4 5 6 7 8", 3),
        ("1 2 3 4 5 6 7 0 8", 3),
        ("1 2 3 4 0 5 6 7 8", 4),
    ],
)
def test_neighbor_count_depends_on_blank_position(flat: str, count: int) -> None:
    assert len(board3(flat).neighbors()) == count


@pytest.mark.parametrize("board", _sample_boards())
def test_neighbors_move_the_blank_one_step(board: Board) -> None:
    neighbors = board.neighbors()
    br, bc = board.blank_pos

    assert 2 <= len(neighbors) <= 4
    for n in neighbors:
        nr, nc = n.blank_pos
        assert abs(nr - br) + abs(nc - bc) == 1
        assert n.goal == board.goal


def test_neighbors_leave_the_board_unchanged() -> None:
    board = board3("1 2 3 4 0 5 6 7 8")
    board.neighbors()

    assert board == board3("1 2 3 4 0 5 6 7 8")


def test_board_without_blank_has_no_neighbors() -> None:
    board = Board(current=((1, 2), (3, 4)), goal=((1, 2), (3, 0)))

    assert board.blank_pos is None
    assert board.neighbors() == []


# -- twin ---------------------------------------------------------------------


def test_twin_swaps_the_last_adjacent_pair() -> None:
    assert board3("1 2 3 4 5 6 7 8 0").twin() == board3("1 2 3 4 5 6 8 7 0")
    assert board3("1 2 3 4 5 6 7 0 8").twin() == board3("1 2 3 4 6 5 7 0 8")
    assert board3("1 2 3 4 5 6 0 7 8").twin() == board3("1 2 3 4 5 6 0 8 7")


@pytest.mark.parametrize("board", _sample_boards())
def test_twin_is_a_single_adjacent_transposition(board: Board) -> None:
    twin = board.twin()
    assert twin is not None

    cells = _diff(board, twin)
    assert len(cells) == 2
    (r1, c1), (r2, c2) = cells
    assert r1 == r2 and abs(c1 - c2) == 1
    assert board.tile(r1, c1) != 0 and board.tile(r2, c2) != 0
    assert twin.tile(r1, c1) == board.tile(r2, c2)
    assert twin.tile(r2, c2) == board.tile(r1, c1)


@pytest.mark.parametrize("board", _sample_boards())
def test_twin_of_twin(board: Board) -> None:
    # Cells scanned before the swapped pair are untouched by the swap, so
    # the second scan stops on the same pair and undoes it.
    assert board.twin().twin() == board


def test_twin_is_none_without_two_adjacent_tiles() -> None:
    board = Board(current=((0, 1), (2, 0)), goal=((1, 2), (0, 0)))

    assert board.twin() is None


# -- moves --------------------------------------------------------------------


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.LEFT, "1 2 3 4 5 6 7 8 0"),
        (Direction.RIGHT, "1 2 3 4 5 6 0 7 8"),
        (Direction.DOWN, "1 2 3 4 0 6 7 5 8"),
        (Direction.UP, None),
    ],
)
def test_move_slides_a_tile_into_the_blank(direction: Direction, expected: str | None) -> None:
    board = board3("1 2 3 4 5 6 7 0 8")
    moved = board.move(direction)

    if expected is None:
        assert moved is None
    else:
        assert moved == board3(expected)
        assert board.direction_to(moved) is direction


def test_direction_to_a_distant_board_is_none() -> None:
    assert board3("1 2 3 4 5 6 7 0 8").direction_to(board3("0 1 2 3 4 5 6 7 8")) is None


def test_str_renders_rows() -> None:
    assert str(board3("1 2 3 4 5 6 7 0 8")) == "1 2 3\n4 5 6\n7 0 8"
