"""
Networked play: the host and remote roles.

- Host: binds a listener, accepts exactly one connection, plays White and draws the board white-bottom.
- Remote: connects once to host:port, plays Black and draws the board black-bottom.
- Both run play_networked(): on the local side's turn read a line from the console, apply it to the
  local referee and, only if it was accepted, send it as one 4-byte frame; on the peer's turn block
  on exactly one frame and apply it. Only move tokens cross the wire, never board state.

Stream errors are fatal for the game and propagate to the caller. Nothing here retries.
"""
from __future__ import annotations
import enum
import logging
import socket

import chess

from . import codec
from .config import SETTINGS, Settings
from .console import Console
from .errors import CodecError
from .render import Perspective
from .session import TurnState, attempt_move, parse_command, persist

log = logging.getLogger("peers")


class Role(enum.Enum):
    HOST = "Host"
    REMOTE = "Remote"

    @property
    def side(self) -> chess.Color:
        return chess.WHITE if self is Role.HOST else chess.BLACK

    @property
    def perspective(self) -> Perspective:
        return Perspective.for_side(self.side)


# ---------------- Turn branches -----------------
def local_turn(sock: socket.socket, state: TurnState, line: str | None, settings: Settings = SETTINGS) -> bool:
    """Handle one line of local input on our turn. Returns False when the player leaves."""
    cmd = parse_command(line, settings.save_file)
    if cmd.kind == "quit":
        return False
    if cmd.kind == "save":
        persist(state, cmd)
    elif cmd.kind == "load":
        state.pending_error = "Loading a game is only available in local play"
    elif cmd.kind == "move":
        try:
            frame = codec.encode_token(cmd.arg)
        except CodecError as e:
            state.pending_error = str(e)
            return True
        if attempt_move(state, cmd.arg):
            codec.write_frame(sock, frame)
    return True


def peer_turn(sock: socket.socket, state: TurnState) -> None:
    """Block on one frame from the peer and apply it. A rejected token leaves the turn with the peer."""
    token = codec.decode(codec.read_frame(sock))
    origin, destination = codec.split(token)
    log.debug("Peer moved %s -> %s", origin, destination)
    attempt_move(state, token)


def play_networked(sock: socket.socket, console: Console, role: Role,
                   settings: Settings = SETTINGS, state: TurnState | None = None) -> int:
    state = state or TurnState()
    state.referee.set_headers(event="duelchess network game", white=Role.HOST.value, black=Role.REMOTE.value)
    log = logging.getLogger(role.value)
    while True:
        console.show(state.referee, role.perspective, state.pending_error)
        if state.referee.is_over():
            log.info("Game over: %s (final position %s)", state.referee.status(), state.referee.fen())
            return 0
        if state.referee.turn == role.side:
            if not local_turn(sock, state, console.prompt(), settings):
                log.info("Player left the game")
                return 0
        else:
            console.write("Waiting for opponent...")
            peer_turn(sock, state)


# ---------------- Host -----------------
def open_listener(port: int, address: str | None = None, console: Console | None = None) -> socket.socket:
    address = SETTINGS.listen_address if address is None else address
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        s.bind((address, port))
        s.listen(1)
    except OSError:
        s.close()
        raise
    bound = s.getsockname()[1]
    logging.getLogger("Host").info("Server started on %s:%d", address, bound)
    if console:
        console.write(f"Server started on port {bound}")
    return s


def serve(listener: socket.socket, console: Console, settings: Settings = SETTINGS) -> int:
    """Accept one connection and play a single game over it as the host."""
    conn, addr = listener.accept()
    logging.getLogger("Host").info("Accepted connection from %s:%d", addr[0], addr[1])
    with conn:
        return play_networked(conn, console, Role.HOST, settings)


def host(port: int, console: Console, settings: Settings = SETTINGS) -> int:
    with open_listener(port, settings.listen_address, console) as listener:
        return serve(listener, console, settings)


# ---------------- Remote -----------------
def connect(host_name: str, port: int) -> socket.socket:
    sock = socket.create_connection((host_name, port))
    logging.getLogger("Remote").info("Connected to %s:%d", host_name, port)
    return sock


def join(sock: socket.socket, console: Console, settings: Settings = SETTINGS) -> int:
    with sock:
        return play_networked(sock, console, Role.REMOTE, settings)


def remote(host_name: str, port: int, console: Console, settings: Settings = SETTINGS) -> int:
    return join(connect(host_name, port), console, settings)
