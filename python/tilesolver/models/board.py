"""Board model for the sliding-tile puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from tilesolver.errors import InvalidBoardError

Grid = tuple[tuple[int, ...], ...]
GoalIndex = dict[int, tuple[int, int]]


class Direction(StrEnum):
    """The direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides for each direction.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT → tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def _freeze(grid: Sequence[Sequence[int]], name: str) -> Grid:
    frozen = tuple(tuple(int(v) for v in row) for row in grid)
    if not frozen or not frozen[0]:
        raise InvalidBoardError(f"The {name} grid is empty.")
    width = len(frozen[0])
    for r, row in enumerate(frozen):
        if len(row) != width:
            raise InvalidBoardError(
                f"Row {r} of the {name} grid has {len(row)} cells, "
                f"expected {width}."
            )
    return frozen


def _index(goal: Grid) -> GoalIndex:
    index: GoalIndex = {}
    for r, row in enumerate(goal):
        for c, v in enumerate(row):
            index.setdefault(v, (r, c))
    return index


@dataclass(frozen=True)
class Board:
    """One puzzle configuration together with the layout it should reach.

    Both grids are copied into tuples on construction, so a board never
    changes once built; every move returns a new ``Board``.  Equality and
    hashing look at ``current`` only.

    Values are not checked against each other: a board whose tiles are not
    a permutation of its goal is accepted and simply never reaches it.
    """

    current: Grid
    goal: Grid = field(compare=False, repr=False)
    _goal_index: GoalIndex | None = field(
        default=None, compare=False, repr=False
    )
    blank_pos: tuple[int, int] | None = field(
        init=False, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        current = _freeze(self.current, "current")
        goal = _freeze(self.goal, "goal")
        if (len(goal), len(goal[0])) != (len(current), len(current[0])):
            raise InvalidBoardError(
                f"Goal is {len(goal)}×{len(goal[0])} but the board is "
                f"{len(current)}×{len(current[0])}."
            )
        object.__setattr__(self, "current", current)
        object.__setattr__(self, "goal", goal)
        if self._goal_index is None:
            object.__setattr__(self, "_goal_index", _index(goal))

        blank: tuple[int, int] | None = None
        for r, row in enumerate(current):
            if 0 in row:
                blank = (r, row.index(0))
                break
        object.__setattr__(self, "blank_pos", blank)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(
        cls,
        rows: int,
        flat: Sequence[int],
        goal: Sequence[int],
        cols: int | None = None,
    ) -> Board:
        """Create a board from flat row-major tile lists.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8],
                               [1, 2, 3, 4, 5, 6, 7, 8, 0])
        """
        cols = rows if cols is None else cols
        for name, values in (("current", flat), ("goal", goal)):
            if len(values) != rows * cols:
                raise InvalidBoardError(
                    f"Expected {rows * cols} tiles for a {rows}×{cols} "
                    f"{name} grid, got {len(values)}."
                )
        return cls(
            current=tuple(
                tuple(flat[r * cols : (r + 1) * cols]) for r in range(rows)
            ),
            goal=tuple(
                tuple(goal[r * cols : (r + 1) * cols]) for r in range(rows)
            ),
        )

    def _with(self, current: Grid) -> Board:
        return Board(current=current, goal=self.goal, _goal_index=self._goal_index)

    def _swapped(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        cells = [list(row) for row in self.current]
        (ar, ac), (br, bc) = a, b
        cells[ar][ac], cells[br][bc] = cells[br][bc], cells[ar][ac]
        return self._with(tuple(tuple(row) for row in cells))

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.current)

    @property
    def cols(self) -> int:
        return len(self.current[0])

    def tile(self, row: int, col: int) -> int:
        return self.current[row][col]

    def is_goal(self) -> bool:
        return self.current == self.goal

    def equals(self, other: object) -> bool:
        """Same as ``==``: compares current layouts, ignoring goals."""
        return self == other

    def is_tile_correct(self, row: int, col: int) -> bool:
        return self.current[row][col] == self.goal[row][col]

    def goal_position(self, value: int) -> tuple[int, int]:
        """Row and column of *value* in the goal grid.

        Values missing from the goal resolve to ``(0, 0)``.
        """
        assert self._goal_index is not None
        return self._goal_index.get(value, (0, 0))

    # -- heuristics -----------------------------------------------------------

    def misplaced_tiles(self) -> int:
        """Number of non-blank tiles not on their goal cell."""
        error = 0
        for row, goal_row in zip(self.current, self.goal):
            for v, g in zip(row, goal_row):
                if v != 0 and v != g:
                    error += 1
        return error

    def manhattan_distance(self) -> int:
        """Sum of row and column distances of every tile from its goal cell."""
        index = self._goal_index
        assert index is not None
        error = 0
        for r, row in enumerate(self.current):
            for c, v in enumerate(row):
                if v != 0:
                    gr, gc = index.get(v, (0, 0))
                    error += abs(gr - r) + abs(gc - c)
        return error

    # -- successors -----------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards reachable by sliding one tile into the blank.

        Ordered left, right, up, down by where the blank goes.  A board
        without a blank has no neighbors.
        """
        if self.blank_pos is None:
            return []
        br, bc = self.blank_pos
        out: list[Board] = []
        if bc > 0:
            out.append(self._swapped((br, bc), (br, bc - 1)))
        if bc < self.cols - 1:
            out.append(self._swapped((br, bc), (br, bc + 1)))
        if br > 0:
            out.append(self._swapped((br, bc), (br - 1, bc)))
        if br < self.rows - 1:
            out.append(self._swapped((br, bc), (br + 1, bc)))
        return out

    def twin(self) -> Board | None:
        """Swap the last horizontally adjacent pair of non-blank tiles.

        Rows are scanned bottom to top and each row right to left.  A twin
        has the opposite solvability of its board.  Returns ``None`` when
        no such pair exists.
        """
        for r in range(self.rows - 1, -1, -1):
            row = self.current[r]
            for c in range(self.cols - 2, -1, -1):
                if row[c] != 0 and row[c + 1] != 0:
                    return self._swapped((r, c), (r, c + 1))
        return None

    def move(self, direction: Direction) -> Board | None:
        """Slide a tile in *direction*; ``None`` if no tile can move that way."""
        if self.blank_pos is None:
            return None
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.rows and 0 <= tc < self.cols):
            return None
        return self._swapped((br, bc), (tr, tc))

    def direction_to(self, other: Board) -> Direction | None:
        """The move that turns this board into *other*, if it is one slide away."""
        if self.blank_pos is None or other.blank_pos is None:
            return None
        (br, bc), (or_, oc) = self.blank_pos, other.blank_pos
        for direction, (dr, dc) in _OFFSETS.items():
            if (br + dr, bc + dc) == (or_, oc) and self.move(direction) == other:
                return direction
        return None

    def __str__(self) -> str:
        width = len(str(max(max(row) for row in self.current)))
        return "\n".join(
            " ".join(f"{v:>{width}}" for v in row) for row in self.current
        )
