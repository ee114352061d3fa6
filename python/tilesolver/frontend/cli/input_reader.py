"""Reading puzzle grids from text for the CLI frontends.

Input is whitespace separated integers; line breaks carry no meaning, so
a 3×3 grid may be typed on one line or on three.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from tilesolver.errors import InvalidBoardError
from tilesolver.models.board import Grid


def to_grid(values: Sequence[int], rows: int, cols: int) -> Grid:
    """Shape *values* into a rows×cols grid, checking it is a full permutation."""
    expected = rows * cols
    if len(values) != expected:
        raise InvalidBoardError(
            f"Expected {expected} tiles for a {rows}×{cols} board, got {len(values)}."
        )
    if sorted(values) != list(range(expected)):
        raise InvalidBoardError(
            f"Tiles must be each of 0..{expected - 1} exactly once, got {list(values)}."
        )
    return tuple(tuple(values[r * cols : (r + 1) * cols]) for r in range(rows))


def parse_grid(text: str, rows: int, cols: int | None = None) -> Grid:
    """Parse a grid from a string such as ``"1 2 3 4 5 6 7 0 8"``.

    Commas and slashes are accepted as separators too.
    """
    cols = rows if cols is None else cols
    tokens = text.replace(",", " ").replace("/", " ").split()
    try:
        values = [int(t) for t in tokens]
    except ValueError:
        raise InvalidBoardError(f"Tiles must be integers, got {text!r}.") from None
    return to_grid(values, rows, cols)


class TokenReader:
    """Pulls integers one at a time from a text stream.

    Raises ``EOFError`` once the stream is exhausted.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._tokens: Iterator[str] = iter(())

    def _next_token(self) -> str:
        stream = self._stream or sys.stdin
        token = next(self._tokens, None)
        while token is None:
            line = stream.readline()
            if not line:
                raise EOFError("No more input.")
            self._tokens = iter(line.split())
            token = next(self._tokens, None)
        return token

    def next_int(self) -> int:
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            raise InvalidBoardError(f"Expected an integer, got {token!r}.") from None

    def read_grid(self, rows: int, cols: int | None = None) -> Grid:
        cols = rows if cols is None else cols
        values = [self.next_int() for _ in range(rows * cols)]
        return to_grid(values, rows, cols)
