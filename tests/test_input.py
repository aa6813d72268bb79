import pytest

from tetris_engine.input import Command, classify_gesture


@pytest.mark.parametrize(
    "end, expected",
    [
        ((0, 0), Command.ROTATE),
        ((19, -19), Command.ROTATE),
        ((40, 5), Command.MOVE_RIGHT),
        ((-40, 25), Command.MOVE_LEFT),
        ((10, 30), Command.MOVE_DOWN),
        ((-5, -30), Command.HARD_DROP),
        ((30, 30), Command.MOVE_DOWN),
        ((20, 0), Command.MOVE_RIGHT),
    ],
)
def test_classify_gesture(end, expected):
    assert classify_gesture((0, 0), end) == expected


def test_threshold_is_configurable():
    assert classify_gesture((10, 10), (40, 10), threshold=50) == Command.ROTATE
    assert classify_gesture((10, 10), (70, 10), threshold=50) == Command.MOVE_RIGHT
