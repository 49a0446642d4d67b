"""Game control between the board model and the user interface."""

from __future__ import annotations

from enum import IntEnum

from snplabs.tictactoe.model import SIZE, Direction, Model, Position, State

CELLS = SIZE * SIZE
NO_WIN = (0, 0, 0)


class Player(IntEnum):
    """The players of the game."""

    NONE = 0
    A = 1
    B = 2


_TO_STATE = {Player.A: State.A, Player.B: State.B}
_TO_PLAYER = {State.A: Player.A, State.B: Player.B}
_OTHER = {Player.A: Player.B, Player.B: Player.A}


def _position(cell: int) -> Position:
    if not 1 <= cell <= CELLS:
        raise ValueError(f"cell out of range: {cell}")
    return Position((cell - 1) // SIZE, (cell - 1) % SIZE)


def _cell(pos: Position) -> int:
    return 1 + pos.row * SIZE + pos.col


class Control:
    """Tracks whose turn it is and translates cells 1..9 to the model."""

    def __init__(self, model: Model) -> None:
        self.model = model
        self.player = Player.A

    def move(self, cell: int) -> None:
        """Play cell (1..9) for the current player; ignore moves not allowed."""
        state = _TO_STATE.get(self.player, State.NONE)
        if not self.model.move(_position(cell), state):
            return
        if self.model.can_move():
            self.player = _OTHER.get(self.player, self.player)
        else:
            self.player = Player.NONE

    def winner(self) -> Player:
        """Return the winning player, or Player.NONE."""
        return _TO_PLAYER.get(self.model.get_winner(), Player.NONE)

    def state(self, cell: int) -> Player:
        """Return the player who played cell (1..9), or Player.NONE."""
        return _TO_PLAYER.get(self.model.get_state(_position(cell)), Player.NONE)

    def win_line(self) -> tuple[int, int, int]:
        """Return the winning cells in increasing order, or (0, 0, 0)."""
        if self.winner() is Player.NONE:
            return NO_WIN
        line = self.model.get_win_line()
        start = _cell(line.start)
        if line.dir is Direction.H:
            return (start, start + 1, start + 2)
        if line.dir is Direction.V:
            return (start, start + 3, start + 6)
        if line.dir is Direction.D:
            if start == 1:
                return (start, start + 4, start + 8)
            return (start, start + 2, start + 4)
        return (1, 1, 1)