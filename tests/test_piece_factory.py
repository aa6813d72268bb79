import random

import numpy as np
import pytest

from tetris_engine.config import EngineConfig
from tetris_engine.tetromino import SHAPES, PieceFactory, TetrominoType, rotate_shape


class FixedChoice:
    """Random source that always picks the same piece type."""

    def __init__(self, piece_type: TetrominoType) -> None:
        self.piece_type = piece_type

    def choice(self, options):
        assert self.piece_type in options
        return self.piece_type


def test_spawn_position_and_type():
    factory = PieceFactory(FixedChoice(TetrominoType.S))
    piece = factory.spawn()
    assert piece.type == TetrominoType.S
    assert (piece.x, piece.y) == (3, 0)
    assert np.array_equal(piece.shape, SHAPES[TetrominoType.S])


def test_spawned_shape_is_an_independent_copy():
    factory = PieceFactory(FixedChoice(TetrominoType.J))
    piece = factory.spawn()
    assert not np.shares_memory(piece.shape, SHAPES[TetrominoType.J])
    piece.shape[0, 0] = 0
    piece.shape = rotate_shape(piece.shape)
    assert SHAPES[TetrominoType.J].tolist() == [[1, 0, 0], [1, 1, 1]]


def test_seeded_factories_repeat_the_same_sequence():
    first = PieceFactory(random.Random(7))
    second = PieceFactory(random.Random(7))
    assert [first.spawn().type for _ in range(20)] == [second.spawn().type for _ in range(20)]


def test_spawn_covers_all_types():
    factory = PieceFactory(random.Random(0))
    seen = {factory.spawn().type for _ in range(500)}
    assert seen == set(TetrominoType)


def test_spawn_position_follows_config():
    factory = PieceFactory(FixedChoice(TetrominoType.O), EngineConfig(spawn_x=5, spawn_y=-1))
    piece = factory.spawn()
    assert (piece.x, piece.y) == (5, -1)


def test_unknown_piece_type_fails_fast():
    with pytest.raises(ValueError):
        PieceFactory().create("X")


def test_piece_cells_are_board_coordinates():
    piece = PieceFactory().create(TetrominoType.T)
    piece.x, piece.y = 2, 5
    assert sorted(piece.cells()) == [(5, 2), (5, 3), (5, 4), (6, 3)]
