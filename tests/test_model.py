import pytest

from snplabs.tictactoe.model import SIZE, Direction, Model, Position, State

N, A, B = State.NONE, State.A, State.B

WIN_B = [
    [N, A, B],
    [A, B, N],
    [B, N, A],
]
OPEN = [
    [N, A, A],
    [A, B, N],
    [B, N, B],
]
FULL = [
    [B, A, A],
    [A, B, B],
    [B, A, A],
]


def all_positions():
    return [Position(row, col) for row in range(SIZE) for col in range(SIZE)]


def test_init_all_none():
    model = Model()
    assert model.board == ((N, N, N), (N, N, N), (N, N, N))


def test_get_state_initial():
    model = Model()
    for pos in all_positions():
        assert model.get_state(pos) is N


def test_get_state_modified():
    model = Model(WIN_B)
    for pos in all_positions():
        assert model.get_state(pos) is WIN_B[pos.row][pos.col]


def test_get_winner():
    assert Model().get_winner() is N
    assert Model(WIN_B).get_winner() is B


def test_can_move():
    assert Model().can_move() is True
    assert Model(OPEN).can_move() is True
    assert Model(WIN_B).can_move() is False
    assert Model(FULL).can_move() is False


def test_move_initial():
    model = Model()
    pos_a = Position(0, 0)
    assert model.move(pos_a, A) is True
    assert model.move(pos_a, A) is False
    assert model.move(pos_a, B) is False
    pos_b = Position(2, 2)
    assert model.move(pos_b, B) is True
    assert model.move(pos_b, B) is False
    assert model.move(pos_b, A) is False
    assert model.get_state(pos_a) is A
    assert model.get_state(pos_b) is B


def test_move_while_open():
    model = Model(OPEN)
    pos = Position(2, 1)
    assert model.move(pos, A) is True
    assert model.move(pos, A) is False
    assert model.move(pos, B) is False


def test_move_after_win():
    model = Model(WIN_B)
    pos = Position(2, 1)
    assert model.move(pos, A) is False
    assert model.move(pos, B) is False
    assert model.get_state(pos) is N


def test_move_when_full():
    model = Model(FULL)
    for pos in all_positions():
        assert model.move(pos, A) is False
        assert model.move(pos, B) is False
    assert model.can_move() is False


@pytest.mark.parametrize("board", [None, OPEN, FULL])
def test_win_line_none(board):
    assert Model(board).get_win_line().dir is Direction.NONE


@pytest.mark.parametrize("row", range(SIZE))
def test_win_line_row(row):
    model = Model()
    for col in range(SIZE):
        assert model.move(Position(row, col), A) is True
    line = model.get_win_line()
    assert line.dir is Direction.H
    assert line.start == Position(row, 0)


@pytest.mark.parametrize("col", range(SIZE))
def test_win_line_column(col):
    model = Model()
    for row in range(SIZE):
        assert model.move(Position(row, col), A) is True
    line = model.get_win_line()
    assert line.dir is Direction.V
    assert line.start == Position(0, col)


def test_win_line_diagonal_left_right():
    model = Model()
    for i in range(SIZE):
        assert model.move(Position(i, i), A) is True
    line = model.get_win_line()
    assert line.dir is Direction.D
    assert line.start == Position(0, 0)


def test_win_line_diagonal_right_left():
    model = Model()
    for i in range(SIZE):
        assert model.move(Position(SIZE - 1 - i, i), A) is True
    line = model.get_win_line()
    assert line.dir is Direction.D
    assert line.start == Position(0, SIZE - 1)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, 3), (3, 3)])
def test_position_out_of_range(row, col):
    with pytest.raises(ValueError):
        Position(row, col)


def test_bad_board_shape():
    with pytest.raises(ValueError):
        Model([[N, N], [N, N]])


def test_board_snapshot_is_independent():
    model = Model()
    before = model.board
    model.move(Position(1, 1), B)
    assert before[1][1] is N
    assert model.board[1][1] is B