# chessnet

A small chess board for two players on two machines. A relay server pairs
two clients. The first client to connect plays White and the second plays
Black. After that, each two-byte move one client sends is passed to the other.

## Install

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running a game

Start the relay server on a machine both players can reach:

```
chessnet-server
```

By default it listens on all interfaces, port 9876. Use `--host` and `--port`
to change that. The server handles one game. It stops when either player
disconnects or sends something other than a two-byte move.

Each player then starts a client:

```
chessnet
```

Options:

- `--host` sets the relay server address. The default is `127.0.0.1`.
- `--port` sets the relay server port. The default is `9876`.
- `--sprites` sets the piece sprite sheet. The default is `assets/pieces.png`.

The client waits for the server to assign a colour. It then opens a 720×720
window and shows the board with that player's army at the bottom.

The sprite sheet is a grid of 90×90 tiles. The columns hold king, queen,
bishop, knight, rook and pawn, in that order. The first row holds the white
pieces and the second row the black ones. If the file does not exist, the
pieces are drawn as plain light and dark discs.

## Playing

- On your turn, press the mouse on one of your own pieces. The squares the
  piece may move to are highlighted.
- Drag the piece to one of those squares and release the button. The move is
  sent to your opponent.
- The last move played is shaded on the board.

## What it does not do

Move generation is simple. It covers:

- king, queen, rook, bishop and knight moves
- pawn pushes, including two squares on a pawn's first move
- diagonal pawn captures

It has no check or checkmate, castling, en passant or promotion. Nothing
detects the end of a game. A client does not check the moves it receives. If
the server goes away, the client simply stops receiving moves.

## Library use

The board logic does not depend on a window or a network:

```python
from chessnet.board import Board
from chessnet.geometry import Move
from chessnet.pieces import PieceType

board = Board(PieceType.WHITE)
print(board.legal_moves(52))          # moves for the pawn in front of the king
board.apply_local_move(Move(52, 36))
```

Board indices run from 0 to 63, row by row from the top-left square of the
player's own view. `board.apply_local_move` raises `ValueError` for a move
that is not legal.

Other modules:

- `chessnet.network.encode_move` and `decode_move` handle the two-byte wire
  format. `decode_move` mirrors the opponent's indices onto this side of the
  board.
- `chessnet.network.Connection` is the client's non-blocking connection to
  the relay.
- `chessnet.server.relay` forwards moves between two connected sockets, and
  `chessnet.server.serve` runs one whole game.