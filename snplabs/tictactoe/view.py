"""Terminal user interface for tic-tac-toe, drawn with ANSI escape sequences."""

from __future__ import annotations

import sys
from typing import TextIO

from snplabs.tictactoe.control import CELLS, Control, Player
from snplabs.tictactoe.model import SIZE, Model

EXIT = "0"

CLS = "\033[2J"
AVAILABLE = "\033[40m"
PLAYER_A = "\033[42m"
PLAYER_B = "\033[41m"
GAP = "\033[47m"
RESET = "\033[0m"

CELL_WIDTH = 10
CELL_HEIGHT = 5
GAP_WIDTH = 4
GAP_HEIGHT = 2

_PLAYER_COLORS = {Player.A: PLAYER_A, Player.B: PLAYER_B}
_PLAYER_NAMES = {Player.A: "Player A", Player.B: "Player B"}


def _goto(row: int, col: int) -> str:
    return f"\033[{row};{col}H"


def _bar(row: int, col: int, width: int, color: str) -> str:
    return f"{_goto(row, col)}{color}{' ' * width}{RESET}"


def _h_gap(row: int, col: int) -> list[str]:
    width = GAP_WIDTH + CELL_WIDTH + GAP_WIDTH
    return [_bar(row + i, col, width, GAP) for i in range(GAP_HEIGHT)]


def _cell_number(y: int, x: int, number: int, color: str) -> str:
    cy = (y + y + CELL_HEIGHT) // 2
    cx = (x + x + CELL_WIDTH - 2) // 2
    return f"{_goto(cy, cx)}{color}{number:2d}{RESET}"


def _cell(index: int, color: str) -> str:
    y = 1 + index // SIZE * (GAP_HEIGHT + CELL_HEIGHT)
    x = 1 + index % SIZE * (GAP_WIDTH + CELL_WIDTH)
    parts = _h_gap(y, x)
    row = y + GAP_HEIGHT
    for _ in range(CELL_HEIGHT):
        parts.append(_bar(row, x, GAP_WIDTH, GAP))
        parts.append(_bar(row, x + GAP_WIDTH, CELL_WIDTH, color))
        parts.append(_bar(row, x + GAP_WIDTH + CELL_WIDTH, GAP_WIDTH, GAP))
        row += 1
    parts.extend(_h_gap(row, x))
    row += GAP_HEIGHT
    parts.append(_cell_number(y + GAP_HEIGHT, x + GAP_WIDTH, index + 1, color))
    parts.append(_goto(row, 0))
    return "".join(parts)


def _player(player: Player) -> str:
    if player in _PLAYER_NAMES:
        return f"{_PLAYER_COLORS[player]}{_PLAYER_NAMES[player]}{RESET}"
    return f"{RESET}none"


def _labelled_player(row: int, col: int, label: str, player: Player) -> str:
    return f"{_goto(row, col)}{RESET}{label}{_goto(row, col + len(label))}{_player(player)}"


def _status(winner: Player, next_player: Player) -> str:
    row = GAP_HEIGHT
    col = SIZE * (GAP_WIDTH + CELL_WIDTH) + GAP_WIDTH + GAP_WIDTH
    parts = [_labelled_player(row, col, "Winner is:      ", winner)]
    row += 2
    parts.append(_labelled_player(row, col, "Next player is: ", next_player))
    row += 4
    parts.append(f"{_goto(row, col)}0:    exit")
    row += 2
    parts.append(f"{_goto(row, col)}1..9: play field")
    return "".join(parts)


class View:
    """Draws the board and feeds keyboard input to the control."""

    def __init__(self, control: Control) -> None:
        self.control = control

    def render(self) -> str:
        """Return the escape sequences that draw the whole screen."""
        parts = [CLS, "\n", _status(self.control.winner(), self.control.player)]
        for index in range(CELLS):
            color = _PLAYER_COLORS.get(self.control.state(index + 1), AVAILABLE)
            parts.append(_cell(index, color))
        return "".join(parts)

    def run(self, stream: TextIO, out: TextIO) -> None:
        """Process characters from stream until EOF or '0', redrawing each time."""
        out.write(self.render())
        out.flush()
        while True:
            ch = stream.read(1)
            if not ch or ch == EXIT:
                break
            if ch in "123456789":
                self.control.move(int(ch))
            out.write(self.render())
            out.flush()


def _run_raw(view: View) -> None:
    try:
        import termios
        import tty
    except ImportError:
        view.run(sys.stdin, sys.stdout)
        return
    fd = sys.stdin.fileno()
    original = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        view.run(sys.stdin, sys.stdout)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)


def main(argv: list[str] | None = None) -> int:
    """Play tic-tac-toe on the terminal."""
    view = View(Control(Model()))
    if sys.stdin.isatty():
        _run_raw(view)
    else:
        view.run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())