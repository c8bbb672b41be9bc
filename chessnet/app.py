"""The game window: mouse input, network polling and drawing."""

from __future__ import annotations

import argparse
import os
from typing import Protocol

import pygame

from .board import Board
from .geometry import Move, index_to_square, square_to_index
from .network import DEFAULT_HOST, DEFAULT_PORT, Connection
from .pieces import piece_color, sprite_rect

WIDTH = 720
HEIGHT = 720
BLOCK_LEN = HEIGHT / 8.0
FPS = 90

WHITE_SQUARE_COLOR = (238, 216, 192, 255)
BLACK_SQUARE_COLOR = (171, 122, 101, 255)
MOVE_COLOR = (207, 172, 106, 180)
LEGAL_MOVE_COLOR = (255, 50, 50, 150)
BACKGROUND_COLOR = (0, 0, 0, 255)

_FALLBACK_PIECE_COLORS = {1: (250, 250, 250), 2: (20, 20, 20)}


class MoveChannel(Protocol):
    def receive_color(self) -> int: ...

    def send_move(self, move: Move) -> None: ...

    def receive_move(self) -> Move: ...


def pixel_to_index(pos: tuple[float, float]) -> int:
    """The board index under a window pixel position."""
    x, y = pos
    return square_to_index((x / BLOCK_LEN, y / BLOCK_LEN))


def _square_origin(index: int) -> tuple[float, float]:
    x, y = index_to_square(index)
    return x * BLOCK_LEN, y * BLOCK_LEN


class Game:
    """One player's view of a networked game."""

    def __init__(self, connection: MoveChannel, sprites: pygame.Surface | None = None) -> None:
        self.connection = connection
        self.sprites = sprites
        self.board = Board(connection.receive_color())
        self.selected: int | None = None
        self.pointer: tuple[float, float] = (0.0, 0.0)

    def handle_press(self, pos: tuple[float, float]) -> None:
        """Pick up the piece under the pointer if it is ours and our turn."""
        self.pointer = pos
        index = pixel_to_index(pos)
        if self.board.can_select(index):
            self.selected = index

    def handle_release(self, pos: tuple[float, float]) -> None:
        """Drop the held piece; play the move if it is legal."""
        self.pointer = pos
        if self.selected is None:
            return
        move = Move(self.selected, pixel_to_index(pos))
        self.selected = None
        if self.board.is_legal(move):
            self.connection.send_move(move)
            self.board.apply_local_move(move)

    def poll_network(self) -> Move | None:
        """Apply the opponent's move if one arrived, and return it."""
        move = self.connection.receive_move()
        if move.is_null():
            return None
        self.board.apply_remote_move(move)
        return move

    def _overlay(self, surface: pygame.Surface, index: int, rgba: tuple[int, int, int, int]) -> None:
        size = round(BLOCK_LEN)
        tile = pygame.Surface((size, size), pygame.SRCALPHA)
        tile.fill(rgba)
        surface.blit(tile, _square_origin(index))

    def _draw_piece(self, surface: pygame.Surface, piece: int, pos: tuple[float, float]) -> None:
        rect = sprite_rect(piece, BLOCK_LEN)
        if rect is None:
            return
        if self.sprites is not None:
            area = pygame.Rect(*(round(v) for v in rect))
            surface.blit(self.sprites, (round(pos[0]), round(pos[1])), area)
            return
        center = (round(pos[0] + BLOCK_LEN / 2), round(pos[1] + BLOCK_LEN / 2))
        fill = _FALLBACK_PIECE_COLORS[piece_color(piece)]
        pygame.draw.circle(surface, fill, center, round(BLOCK_LEN / 3))

    def draw(self, surface: pygame.Surface) -> None:
        """Render the board, highlights and pieces onto the surface."""
        surface.fill(BACKGROUND_COLOR)
        size = round(BLOCK_LEN)
        for index in range(64):
            col, row = index_to_square(index)
            color = WHITE_SQUARE_COLOR if (row + col) % 2 == 0 else BLACK_SQUARE_COLOR
            x, y = _square_origin(index)
            surface.fill(color, pygame.Rect(round(x), round(y), size, size))

        last = self.board.last_move
        if not last.is_null():
            self._overlay(surface, last.start, MOVE_COLOR)
            self._overlay(surface, last.end, MOVE_COLOR)

        if self.selected is not None:
            for move in self.board.legal_moves(self.selected):
                self._overlay(surface, move.end, LEGAL_MOVE_COLOR)

        for index, square in enumerate(self.board.squares):
            if index != self.selected:
                self._draw_piece(surface, square.type, _square_origin(index))

        if self.selected is not None:
            x, y = self.pointer
            held = self.board.squares[self.selected].type
            self._draw_piece(surface, held, (x - BLOCK_LEN / 2, y - BLOCK_LEN / 2))


def _load_sprites(path: str) -> pygame.Surface | None:
    if not os.path.exists(path):
        return None
    return pygame.image.load(path).convert_alpha()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play one networked game."""
    parser = argparse.ArgumentParser(description="Play chess against a remote opponent.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="relay server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="relay server port")
    parser.add_argument("--sprites", default=os.path.join("assets", "pieces.png"), help="piece sprite sheet")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Chess")
        sprites = _load_sprites(args.sprites)
        with Connection(args.host, args.port) as connection:
            game = Game(connection, sprites)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        game.handle_press(event.pos)
                    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                        game.handle_release(event.pos)
                    elif event.type == pygame.MOUSEMOTION:
                        game.pointer = event.pos
                game.poll_network()
                game.draw(screen)
                pygame.display.flip()
                clock.tick(FPS)
    finally:
        pygame.quit()
    return 0