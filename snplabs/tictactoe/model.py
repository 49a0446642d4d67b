"""Tic-tac-toe board state and rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

SIZE = 3


class State(IntEnum):
    """The state of one field of the board."""

    NONE = 0
    A = 1
    B = 2


class Direction(IntEnum):
    """Direction of a winning line."""

    NONE = 0
    H = 1
    V = 2
    D = 3


@dataclass(frozen=True)
class Position:
    """A 0-based (row, col) position on the board."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < SIZE and 0 <= self.col < SIZE):
            raise ValueError(f"position out of range: {self.row}/{self.col}")


@dataclass(frozen=True)
class Line:
    """A winning line given by its direction and start position."""

    dir: Direction
    start: Position


_NO_LINE = Line(Direction.NONE, Position(0, 0))


class Model:
    """The board of a game: who played which field, and who won."""

    def __init__(self, board: Sequence[Sequence[int]] | None = None) -> None:
        if board is None:
            self._board = [[State.NONE] * SIZE for _ in range(SIZE)]
            return
        rows = [[State(value) for value in row] for row in board]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"board must be {SIZE}x{SIZE}")
        self._board = rows

    @property
    def board(self) -> tuple[tuple[State, ...], ...]:
        """A snapshot of the board, row by row."""
        return tuple(tuple(row) for row in self._board)

    def get_state(self, pos: Position) -> State:
        """Return the state of the field at pos."""
        return self._board[pos.row][pos.col]

    def _same(self, positions: Iterable[Position]) -> bool:
        states = [self.get_state(pos) for pos in positions]
        return states[0] is not State.NONE and all(s is states[0] for s in states)

    def get_win_line(self) -> Line:
        """Return the winning line, or a line with Direction.NONE."""
        for row in range(SIZE):
            if self._same(Position(row, col) for col in range(SIZE)):
                return Line(Direction.H, Position(row, 0))
        for col in range(SIZE):
            if self._same(Position(row, col) for row in range(SIZE)):
                return Line(Direction.V, Position(0, col))
        if self._same(Position(i, i) for i in range(SIZE)):
            return Line(Direction.D, Position(0, 0))
        if self._same(Position(SIZE - 1 - i, i) for i in range(SIZE)):
            return Line(Direction.D, Position(0, SIZE - 1))
        return _NO_LINE

    def get_winner(self) -> State:
        """Return the winning player's state, or State.NONE."""
        line = self.get_win_line()
        if line.dir is Direction.NONE:
            return State.NONE
        return self.get_state(line.start)

    def can_move(self) -> bool:
        """True if nobody has won yet and a field is still free."""
        if self.get_winner() is not State.NONE:
            return False
        return any(state is State.NONE for row in self._board for state in row)

    def move(self, pos: Position, state: State) -> bool:
        """Play the field at pos if allowed; return whether it was played."""
        if self.get_state(pos) is State.NONE and self.can_move():
            self._board[pos.row][pos.col] = State(state)
            return True
        return False