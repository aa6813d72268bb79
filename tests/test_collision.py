import pytest

from tetris_engine.board import Board
from tetris_engine.tetromino import SHAPES, PieceFactory, TetrominoType
from tetris_engine.utils import can_move, fits


@pytest.mark.parametrize(
    "piece_type, x, y",
    [
        (TetrominoType.I, -1, 5),
        (TetrominoType.I, 7, 5),
        (TetrominoType.O, 9, 0),
        (TetrominoType.O, 0, 19),
        (TetrominoType.T, 3, 20),
        (TetrominoType.L, -1, -1),
    ],
)
def test_out_of_bounds_placements_rejected(piece_type, x, y):
    assert not fits(SHAPES[piece_type], x, y, Board())


def test_protruding_above_board_is_allowed():
    board = Board()
    assert fits(SHAPES[TetrominoType.O], 0, -1, board)
    assert fits(SHAPES[TetrominoType.J], 4, -2, board)


def test_protruding_above_board_still_checks_visible_cells():
    board = Board()
    board.set_cell(0, 1, 1)
    assert not fits(SHAPES[TetrominoType.O], 0, -1, board)
    board.set_cell(0, 1, 0)
    board.grid[0] = 1
    assert not fits(SHAPES[TetrominoType.O], 4, -1, board)
    assert fits(SHAPES[TetrominoType.O], 4, -2, board)


def test_collides_with_locked_cell():
    board = Board()
    board.set_cell(19, 4, 1)
    assert not fits(SHAPES[TetrominoType.T], 3, 18, board)
    assert fits(SHAPES[TetrominoType.T], 3, 17, board)
    # The T's empty corner can sit over the locked block.
    board.set_cell(19, 4, 0)
    board.set_cell(19, 3, 1)
    assert fits(SHAPES[TetrominoType.T], 3, 18, board)


def test_resting_on_floor_fits():
    assert fits(SHAPES[TetrominoType.O], 8, 18, Board())


def test_can_move_checks_offset_from_piece_position():
    board = Board()
    piece = PieceFactory().create(TetrominoType.O)
    piece.x, piece.y = 0, 18
    assert not can_move(board, piece, -1, 0)
    assert not can_move(board, piece, 0, 1)
    assert can_move(board, piece, 1, 0)
