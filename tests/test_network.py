import socket
import time

import pytest

from chessnet.geometry import NULL_MOVE, Move
from chessnet.network import Connection, decode_move, encode_move
from chessnet.pieces import PieceType


@pytest.fixture
def listener():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen(1)
        yield sock


@pytest.fixture
def linked(listener):
    port = listener.getsockname()[1]
    conn = Connection("127.0.0.1", port)
    peer, _ = listener.accept()
    with peer:
        yield conn, peer
    conn.close()


def _wait_for_move(conn, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        move = conn.receive_move()
        if not move.is_null():
            return move
        time.sleep(0.01)
    return NULL_MOVE


def test_encode_move_bytes():
    assert encode_move(Move(12, 28)) == bytes([12, 28])


@pytest.mark.parametrize("move", [Move(-1, 5), Move(5, 64), Move(100, 0)])
def test_encode_move_rejects_out_of_range(move):
    with pytest.raises(ValueError):
        encode_move(move)


def test_decode_move_mirrors_board():
    assert decode_move(bytes([1, 2])) == Move(62, 61)


@pytest.mark.parametrize("data", [b"", b"\x01", b"\x01\x02\x03"])
def test_decode_move_wrong_length_is_null(data):
    assert decode_move(data).is_null()


@pytest.mark.parametrize("raw", [bytes([0, 63]), bytes([12, 28]), bytes([52, 36])])
def test_mirroring_twice_is_identity(raw):
    once = decode_move(raw)
    assert decode_move(encode_move(once)) == Move(raw[0], raw[1])


def test_receive_color(linked):
    conn, peer = linked
    peer.sendall(bytes([PieceType.BLACK]))
    assert conn.receive_color() == PieceType.BLACK


def test_receive_color_on_closed_connection_raises(linked):
    conn, peer = linked
    peer.close()
    with pytest.raises(ConnectionError):
        conn.receive_color()


def test_receive_move_without_data_is_null(linked):
    conn, _ = linked
    assert conn.receive_move() == NULL_MOVE


def test_receive_move_decodes(linked):
    conn, peer = linked
    peer.sendall(encode_move(Move(12, 28)))
    assert _wait_for_move(conn) == decode_move(bytes([12, 28]))


def test_send_move_reaches_peer(linked):
    conn, peer = linked
    conn.send_move(Move(52, 36))
    peer.settimeout(3)
    assert peer.recv(2) == bytes([52, 36])


def test_connection_refused():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    with pytest.raises(OSError):
        Connection("127.0.0.1", port)


def test_context_manager_closes(listener):
    port = listener.getsockname()[1]
    with Connection("127.0.0.1", port) as conn:
        peer, _ = listener.accept()
        peer.close()
    with pytest.raises(OSError):
        conn.send_move(Move(1, 2))