"""Board coordinates, step directions and moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

Square = tuple[int, int]

BOARD_SIZE = 8


class Direction(IntEnum):
    """Single steps a piece can take: compass points and the eight knight jumps."""

    N = 0
    E = 1
    S = 2
    W = 3
    NE = 4
    SE = 5
    SW = 6
    NW = 7
    K1 = 8
    K2 = 9
    K4 = 10
    K5 = 11
    K7 = 12
    K8 = 13
    K10 = 14
    K11 = 15

    @property
    def delta(self) -> Square:
        """The (dx, dy) offset of this direction; y grows downwards."""
        return _DELTAS[self]


_DELTAS: dict[Direction, Square] = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
    Direction.NE: (1, -1),
    Direction.SE: (1, 1),
    Direction.SW: (-1, 1),
    Direction.NW: (-1, -1),
    Direction.K1: (1, -2),
    Direction.K2: (2, -1),
    Direction.K4: (2, 1),
    Direction.K5: (1, 2),
    Direction.K7: (-1, 2),
    Direction.K8: (-2, 1),
    Direction.K10: (-2, -1),
    Direction.K11: (-1, -2),
}

ALL_STEPS = tuple(d for d in Direction if d <= Direction.NW)
DIAGONALS = tuple(d for d in Direction if Direction.NE <= d <= Direction.NW)
ORTHOGONALS = tuple(d for d in Direction if d <= Direction.W)
KNIGHT_JUMPS = tuple(d for d in Direction if d >= Direction.K1)


@dataclass(frozen=True)
class Move:
    """A move from one board index to another."""

    start: int
    end: int

    def is_null(self) -> bool:
        """True for the placeholder move 0 -> 0 meaning 'no move'."""
        return self.start == 0 and self.end == 0


NULL_MOVE = Move(0, 0)


def index_to_square(index: int) -> Square:
    """Turn a board index 0..63 into an (x, y) square."""
    return index % BOARD_SIZE, index // BOARD_SIZE


def square_to_index(square: Square) -> int:
    """Turn an (x, y) square into a board index."""
    x, y = square
    return int(y) * BOARD_SIZE + int(x)


def step(square: Square, direction: Direction) -> Square:
    """Take one step; if it would leave the board, the square is returned unchanged."""
    x, y = square
    dx, dy = Direction(direction).delta
    nx, ny = x + dx, y + dy
    if 0 <= nx < BOARD_SIZE and 0 <= ny < BOARD_SIZE:
        return nx, ny
    return x, y