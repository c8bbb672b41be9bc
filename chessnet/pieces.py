"""Piece codes: a kind in the low three bits and a colour flag above them."""

from __future__ import annotations

from enum import IntEnum


class PieceType(IntEnum):
    """Piece kinds and colour flags; combine one of each with ``|``."""

    NONE = 0
    KING = 1
    QUEEN = 2
    BISHOP = 3
    KNIGHT = 4
    ROOK = 5
    PAWN = 6
    WHITE = 8
    BLACK = 16


_KIND_MASK = 7
_COLOR_SHIFT = 3
_BOTH_COLORS = PieceType.WHITE | PieceType.BLACK


def piece_kind(piece: int) -> int:
    """The kind part of a piece code (0 for an empty square)."""
    return int(piece) & _KIND_MASK


def piece_color(piece: int) -> int:
    """The colour part shifted down: 0 empty, 1 white, 2 black."""
    return int(piece) >> _COLOR_SHIFT


def invert_color(color: int) -> int:
    """Swap the WHITE and BLACK flags."""
    return _BOTH_COLORS ^ int(color)


def sprite_rect(piece: int, block_len: float) -> tuple[float, float, float, float] | None:
    """Source rectangle of the piece in the sprite sheet, or None for no piece."""
    kind = piece_kind(piece)
    color = piece_color(piece)
    if kind == 0 or color == 0:
        return None
    return ((kind - 1) * block_len, (color - 1) * block_len, block_len, block_len)