"""Board state and move generation from the local player's point of view."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import (
    ALL_STEPS,
    DIAGONALS,
    KNIGHT_JUMPS,
    NULL_MOVE,
    ORTHOGONALS,
    Direction,
    Move,
    index_to_square,
    square_to_index,
    step,
)
from .pieces import PieceType, invert_color, piece_color, piece_kind

P = PieceType


@dataclass
class Piece:
    """One square of the board: its piece code and bookkeeping."""

    type: int = P.NONE
    has_moved: bool = False
    legal_moves: list[Move] = field(default_factory=list)


def starting_layout(color: int) -> list[int]:
    """Initial 64 piece codes, with the given player's army at the bottom."""
    if color == P.BLACK:
        top, bottom = P.WHITE, P.BLACK
        back = [P.ROOK, P.KNIGHT, P.BISHOP, P.KING, P.QUEEN, P.BISHOP, P.KNIGHT, P.ROOK]
    else:
        top, bottom = P.BLACK, P.WHITE
        back = [P.ROOK, P.KNIGHT, P.BISHOP, P.QUEEN, P.KING, P.BISHOP, P.KNIGHT, P.ROOK]
    layout = [int(P.NONE)] * 64
    layout[0:8] = [kind | top for kind in back]
    layout[8:16] = [P.PAWN | top] * 8
    layout[48:56] = [P.PAWN | bottom] * 8
    layout[56:64] = [kind | bottom for kind in back]
    return layout


class Board:
    """Squares, whose turn it is, and legal moves of the local player's pieces."""

    def __init__(self, color: int) -> None:
        self.color = int(color)
        self.turn = int(P.WHITE)
        self.last_move = NULL_MOVE
        self.squares = [Piece(code) for code in starting_layout(self.color)]
        self.calculate_legal_moves()

    def _color_at(self, index: int) -> int:
        return piece_color(self.squares[index].type)

    def _slide(self, index: int, directions: tuple[Direction, ...]) -> list[Move]:
        own = piece_color(self.color)
        enemy = piece_color(invert_color(self.color))
        moves: list[Move] = []
        start = index_to_square(index)
        for direction in directions:
            previous = start
            while True:
                nxt = step(previous, direction)
                target = square_to_index(nxt)
                if nxt == previous or self._color_at(target) == own:
                    break
                moves.append(Move(index, target))
                if self._color_at(target) == enemy:
                    break
                previous = nxt
        return moves

    def _jumps(self, index: int, directions: tuple[Direction, ...]) -> list[Move]:
        own = piece_color(self.color)
        start = index_to_square(index)
        moves = []
        for direction in directions:
            end = step(start, direction)
            target = square_to_index(end)
            if end != start and self._color_at(target) != own:
                moves.append(Move(index, target))
        return moves

    def _pawn(self, index: int, piece: Piece) -> list[Move]:
        own = piece_color(self.color)
        start = index_to_square(index)
        moves = []
        for direction in (Direction.NE, Direction.NW):
            target = square_to_index(step(start, direction))
            if self.squares[target].type != P.NONE and self._color_at(target) != own:
                moves.append(Move(index, target))
        end = step(start, Direction.N)
        target = square_to_index(end)
        if self.squares[target].type == P.NONE:
            moves.append(Move(index, target))
        if not piece.has_moved:
            target = square_to_index(step(end, Direction.N))
            if self.squares[target].type == P.NONE:
                moves.append(Move(index, target))
        return moves

    def calculate_legal_moves(self) -> None:
        """Recompute the move lists of the local player's pieces; others get none."""
        own = piece_color(self.color)
        for index, piece in enumerate(self.squares):
            piece.legal_moves = []
            if piece_color(piece.type) != own:
                continue
            kind = piece_kind(piece.type)
            if kind == P.KING:
                piece.legal_moves = self._jumps(index, ALL_STEPS)
            elif kind == P.QUEEN:
                piece.legal_moves = self._slide(index, ALL_STEPS)
            elif kind == P.BISHOP:
                piece.legal_moves = self._slide(index, DIAGONALS)
            elif kind == P.KNIGHT:
                piece.legal_moves = self._jumps(index, KNIGHT_JUMPS)
            elif kind == P.ROOK:
                piece.legal_moves = self._slide(index, ORTHOGONALS)
            elif kind == P.PAWN:
                piece.legal_moves = self._pawn(index, piece)

    def legal_moves(self, index: int) -> list[Move]:
        """The legal moves of the piece on the given square."""
        return list(self.squares[index].legal_moves)

    def is_legal(self, move: Move) -> bool:
        """Whether the move is one of its piece's legal moves."""
        if move.start == move.end or not 0 <= move.start < 64:
            return False
        return move in self.squares[move.start].legal_moves

    def can_select(self, index: int) -> bool:
        """Whether the local player may pick up the piece on this square now."""
        if not 0 <= index < 64:
            return False
        return self._color_at(index) == piece_color(self.color) and self.turn == self.color

    def apply_local_move(self, move: Move) -> None:
        """Play one of the local player's legal moves; raises ValueError otherwise."""
        if not self.is_legal(move):
            raise ValueError(f"illegal move {move.start} -> {move.end}")
        self.last_move = move
        self.squares[move.end].type = self.squares[move.start].type
        self.squares[move.end].has_moved = True
        self.squares[move.start].type = P.NONE
        self.turn = invert_color(self.turn)

    def apply_remote_move(self, move: Move) -> None:
        """Play the opponent's move, already in local coordinates, and recompute moves."""
        if not (0 <= move.start < 64 and 0 <= move.end < 64):
            raise ValueError(f"move out of range {move.start} -> {move.end}")
        self.squares[move.end].type = self.squares[move.start].type
        self.squares[move.start].type = P.NONE
        self.turn = invert_color(self.turn)
        self.last_move = move
        self.calculate_legal_moves()