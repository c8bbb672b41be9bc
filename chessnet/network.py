"""Client side of the two-byte move protocol spoken with the relay server."""

from __future__ import annotations

import socket
from collections.abc import Iterator
from contextlib import contextmanager

from .geometry import NULL_MOVE, Move

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9876
MOVE_SIZE = 2
_LAST_INDEX = 63


def encode_move(move: Move) -> bytes:
    """Two bytes, start then end, in the sender's own coordinates."""
    for index in (move.start, move.end):
        if not 0 <= index <= _LAST_INDEX:
            raise ValueError(f"square index out of range: {index}")
    return bytes((move.start, move.end))


def decode_move(data: bytes) -> Move:
    """Turn the opponent's two bytes into a move seen from this side of the board.

    Anything but exactly two bytes yields the null move.
    """
    if len(data) != MOVE_SIZE:
        return NULL_MOVE
    return Move(_LAST_INDEX - data[0], _LAST_INDEX - data[1])


class Connection:
    """A TCP connection to the relay server whose move reads never block."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.connect((host, port))
        except OSError:
            sock.close()
            raise
        sock.setblocking(False)
        self._sock = sock

    @contextmanager
    def _blocking(self) -> Iterator[socket.socket]:
        self._sock.setblocking(True)
        try:
            yield self._sock
        finally:
            self._sock.setblocking(False)

    def send_move(self, move: Move) -> None:
        """Send one of our moves to the opponent."""
        data = encode_move(move)
        with self._blocking() as sock:
            sock.sendall(data)

    def receive_move(self) -> Move:
        """The opponent's next move, or the null move if none is waiting."""
        try:
            data = self._sock.recv(MOVE_SIZE)
        except (BlockingIOError, InterruptedError):
            return NULL_MOVE
        return decode_move(data)

    def receive_color(self) -> int:
        """Wait for the colour code the server assigns to this player."""
        with self._blocking() as sock:
            data = sock.recv(1)
        if not data:
            raise ConnectionError("server closed the connection before assigning a colour")
        return data[0]

    def close(self) -> None:
        """Close the connection."""
        self._sock.close()

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()