import pytest

from tetris.board import BOARD_HEIGHT, BOARD_WIDTH, Board
from tetris.tetromino import SHAPES, Tetromino

I, O = 0, 2


def piece(index, x, y):
    return Tetromino(x=x, y=y, shape=SHAPES[index], color=(1, 2, 3))


def test_default_size():
    board = Board()
    assert (board.width, board.height) == (BOARD_WIDTH, BOARD_HEIGHT) == (10, 20)
    assert not any(any(row) for row in board.rows)


def test_is_filled_out_of_range_raises():
    with pytest.raises(IndexError):
        Board().is_filled(BOARD_WIDTH, 0)


def test_can_move_respects_walls():
    board = Board()
    assert not board.can_move(piece(I, 0, 0), -1, 0)
    assert not board.can_move(piece(I, BOARD_WIDTH - 4, 0), 1, 0)
    assert not board.can_move(piece(I, 0, BOARD_HEIGHT - 1), 0, 1)
    assert board.can_move(piece(I, 0, 0), 1, 1)


def test_can_move_blocked_by_filled_cell():
    board = Board()
    board.place(piece(O, 0, BOARD_HEIGHT - 2))
    falling = piece(O, 0, BOARD_HEIGHT - 4)
    assert board.can_move(falling, 0, 0)
    assert not board.can_move(falling, 0, 1)


def test_place_fills_piece_cells():
    board = Board()
    p = piece(O, 3, 5)
    board.place(p)
    for x, y in p.cells():
        assert board.is_filled(x, y)
    assert sum(sum(row) for row in board.rows) == 4


def test_place_drops_cells_outside():
    board = Board()
    board.place(piece(I, BOARD_WIDTH - 2, 0))
    assert sum(sum(row) for row in board.rows) == 2


def test_clear_lines_removes_full_row_and_shifts():
    board = Board()
    bottom = BOARD_HEIGHT - 1
    board.place(piece(I, 0, bottom))
    board.place(piece(I, 4, bottom))
    board.place(piece(O, 8, bottom - 1))
    assert board.clear_lines() == 1
    assert [board.is_filled(x, bottom) for x in range(BOARD_WIDTH)] == [False] * 8 + [True] * 2
    assert not any(board.rows[bottom - 1])
    assert len(board.rows) == BOARD_HEIGHT


def test_clear_lines_nothing_full():
    board = Board()
    board.place(piece(O, 0, 0))
    before = [row[:] for row in board.rows]
    assert board.clear_lines() == 0
    assert board.rows == before


def test_clear_multiple_rows():
    board = Board()
    board.rows[-1] = [True] * BOARD_WIDTH
    board.rows[-2] = [True] * BOARD_WIDTH
    board.rows[-3][0] = True
    assert board.clear_lines() == 2
    assert board.is_filled(0, BOARD_HEIGHT - 1)
    assert sum(sum(row) for row in board.rows) == 1


def test_ghost_lands_on_floor_and_stack():
    board = Board()
    assert board.ghost(piece(I, 0, 0)).y == BOARD_HEIGHT - 1
    board.place(piece(O, 0, BOARD_HEIGHT - 2))
    ghost = board.ghost(piece(I, 0, 0))
    assert ghost.y == BOARD_HEIGHT - 3
    assert not board.can_move(ghost, 0, 1)