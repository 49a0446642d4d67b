import pytest

from snplabs.tictactoe.control import NO_WIN, Control, Player
from snplabs.tictactoe.model import Model, Position, State


def play(cells):
    control = Control(Model())
    for cell in cells:
        control.move(cell)
    return control


def test_initial_state():
    control = Control(Model())
    assert control.player is Player.A
    assert control.winner() is Player.NONE
    assert control.win_line() == NO_WIN
    assert all(control.state(cell) is Player.NONE for cell in range(1, 10))


def test_players_alternate():
    control = Control(Model())
    control.move(5)
    assert control.player is Player.B
    assert control.state(5) is Player.A
    control.move(1)
    assert control.player is Player.A
    assert control.state(1) is Player.B


def test_occupied_cell_is_ignored():
    control = play([5])
    control.move(5)
    assert control.player is Player.B
    assert control.state(5) is Player.A


def test_cell_maps_to_model_position():
    model = Model()
    control = Control(model)
    control.move(1)
    control.move(9)
    assert model.get_state(Position(0, 0)) is State.A
    assert model.get_state(Position(2, 2)) is State.B


def test_row_win():
    control = play([1, 4, 2, 5, 3])
    assert control.winner() is Player.A
    assert control.player is Player.NONE
    assert control.win_line() == (1, 2, 3)


def test_diagonal_wins():
    assert play([1, 2, 5, 3, 9]).win_line() == (1, 5, 9)
    assert play([3, 1, 5, 2, 7]).win_line() == (3, 5, 7)


@pytest.mark.parametrize(
    "cells",
    [
        [1, 4, 2, 5, 3],
        [4, 1, 5, 2, 6],
        [1, 2, 4, 3, 7],
        [3, 1, 6, 2, 9],
        [2, 1, 5, 3, 8],
        [1, 2, 5, 3, 9],
    ],
)
def test_win_line_cells_belong_to_winner(cells):
    control = play(cells)
    line = control.win_line()
    assert list(line) == sorted(line)
    assert len(set(line)) == 3
    assert all(control.state(cell) is control.winner() for cell in line)
    assert control.winner() is not Player.NONE


def test_no_moves_after_win():
    control = play([1, 4, 2, 5, 3])
    control.move(9)
    assert control.state(9) is Player.NONE
    assert control.player is Player.NONE


def test_draw_ends_without_winner():
    control = play([1, 2, 3, 5, 4, 6, 8, 7, 9])
    assert control.winner() is Player.NONE
    assert control.player is Player.NONE
    assert control.win_line() == NO_WIN
    assert all(control.state(cell) is not Player.NONE for cell in range(1, 10))


@pytest.mark.parametrize("cell", [0, 10, -1])
def test_invalid_cell(cell):
    control = Control(Model())
    with pytest.raises(ValueError):
        control.move(cell)
    with pytest.raises(ValueError):
        control.state(cell)