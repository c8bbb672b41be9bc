"""Relay server: pairs two players and forwards each one's moves to the other."""

from __future__ import annotations

import argparse
import select
import socket

from .pieces import PieceType

DEFAULT_HOST = ""
DEFAULT_PORT = 9876
BACKLOG = 10
MOVE_SIZE = 2


def relay(player1: socket.socket, player2: socket.socket) -> None:
    """Forward two-byte moves between the players until one of them stops."""
    peers = {player1: player2, player2: player1}
    while True:
        readable, _, _ = select.select([player1, player2], [], [])
        source = player1 if player1 in readable else player2
        try:
            data = source.recv(MOVE_SIZE)
        except OSError:
            return
        if len(data) != MOVE_SIZE:
            return
        try:
            peers[source].sendall(data)
        except OSError:
            return


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Accept white then black, tell each its colour, and relay one game."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen(BACKLOG)
        white, _ = listener.accept()
        with white:
            white.sendall(bytes([PieceType.WHITE]))
            black, _ = listener.accept()
            with black:
                black.sendall(bytes([PieceType.BLACK]))
                relay(white, black)


def main(argv: list[str] | None = None) -> int:
    """Run the relay server for one game."""
    parser = argparse.ArgumentParser(description="Relay moves between two chess players.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    serve(args.host, args.port)
    return 0