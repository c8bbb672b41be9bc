import pytest

from chessnet.geometry import (
    Direction,
    Move,
    index_to_square,
    square_to_index,
    step,
)


def test_index_zero_is_top_left():
    assert index_to_square(0) == (0, 0)


@pytest.mark.parametrize("index", range(64))
def test_index_square_round_trip(index):
    square = index_to_square(index)
    assert all(0 <= c < 8 for c in square)
    assert square_to_index(square) == index


def test_null_move():
    assert Move(0, 0).is_null()
    assert not Move(0, 1).is_null()
    assert not Move(5, 0).is_null()


def test_move_equality():
    assert Move(52, 36) == Move(52, 36)
    assert Move(52, 36) != Move(36, 52)


def test_step_north_decreases_y():
    x, y = step((3, 3), Direction.N)
    assert (x, y) == (3, 2)


@pytest.mark.parametrize("direction", list(Direction))
def test_step_moves_by_delta_in_middle(direction):
    dx, dy = direction.delta
    assert step((4, 4), direction) == (4 + dx, 4 + dy)


@pytest.mark.parametrize("direction", [Direction.N, Direction.W, Direction.NW, Direction.K11, Direction.K10])
def test_step_off_board_top_left_stays(direction):
    assert step((0, 0), direction) == (0, 0)


@pytest.mark.parametrize("direction", [Direction.S, Direction.E, Direction.SE, Direction.K4, Direction.K5])
def test_step_off_board_bottom_right_stays(direction):
    assert step((7, 7), direction) == (7, 7)


def test_opposite_steps_cancel():
    pairs = [(Direction.N, Direction.S), (Direction.E, Direction.W), (Direction.NE, Direction.SW)]
    for a, b in pairs:
        assert step(step((3, 3), a), b) == (3, 3)


def test_knight_jumps_are_distinct():
    targets = {step((4, 4), d) for d in Direction if d >= Direction.K1}
    assert len(targets) == 8