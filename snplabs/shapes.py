"""Render simple coloured shapes with ANSI escape sequences."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import IntEnum

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
WHITE = "\x1b[37m"
RESET = "\x1b[0m"

COLORS = (RED, GREEN, YELLOW)

SHAPE_PROMPT = "Geben Sie die gewünschte Form an [OVAL=0 | RECTANGLE=1]:"
SIZE_PROMPT = "Geben Sie die gewünschte Grösse an:"
COLOR_PROMPT = "Geben Sie die gewünschte Farb an [RED=0 | GREEN=1 | YELLOW=2]:"
CONTINUE_PROMPT = "\nMöchten sie weiter machen oder abbrechen? [(n)ext|(q)uit] "


class ShapeType(IntEnum):
    OVAL = 0
    RECTANGLE = 1


@dataclass(frozen=True)
class Graphic:
    """A shape with its size and its colour escape sequence."""

    shape: ShapeType
    size: int
    color: str


def render(graphic: Graphic) -> str:
    """Return the text drawing of the graphic, one line per row."""
    radius = graphic.size / 2.0
    star = f"{graphic.color}*{RESET}"
    cells = range(graphic.size + 1)

    def cell(i: int, j: int) -> str:
        if graphic.shape is ShapeType.RECTANGLE:
            return star
        distance = math.hypot(i - radius, j - radius)
        return star if radius - 0.5 < distance < radius + 0.5 else " "

    return "".join("".join(cell(i, j) for j in cells) + "\n" for i in cells)


def _ask(stdin, stdout, prompt: str) -> int:
    stdout.write(prompt)
    line = stdin.readline()
    if not line:
        raise EOFError
    return int(line.strip())


def _read_graphic(stdin, stdout) -> Graphic:
    shape = ShapeType(_ask(stdin, stdout, SHAPE_PROMPT))
    size = _ask(stdin, stdout, SIZE_PROMPT) - 1
    color_index = _ask(stdin, stdout, COLOR_PROMPT)
    if not 0 <= color_index < len(COLORS):
        raise ValueError(f"invalid colour: {color_index}")
    return Graphic(shape=shape, size=size, color=COLORS[color_index])


def main(argv: list[str] | None = None) -> int:
    """Ask for shapes on stdin and draw them until the user stops."""
    stdin, stdout = sys.stdin, sys.stdout
    while True:
        try:
            graphic = _read_graphic(stdin, stdout)
        except EOFError:
            break
        except ValueError as exc:
            stdout.write(f"\nUngültige Eingabe: {exc}\n")
        else:
            stdout.write(render(graphic))
        stdout.write(CONTINUE_PROMPT)
        if not stdin.readline().startswith("n"):
            break
    stdout.write("Byebye..\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())