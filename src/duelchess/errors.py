"""
Exception types shared across duelchess.

- MoveRejected and its subclasses: the referee refused a move token (non-fatal, shown to the player).
- PersistenceError: save/load failed (non-fatal).
- CodecError: a token does not fit the fixed 4-byte frame (non-fatal, nothing is sent).
- ProtocolError / PeerDisconnected: the stream to the peer is unusable (fatal for the game).
"""
from __future__ import annotations


class DuelChessError(Exception):
    """Base class for every error raised by duelchess itself."""


class MoveRejected(DuelChessError):
    def __init__(self, token: str, reason: str):
        super().__init__(f"{reason}: {token!r}")
        self.token = token
        self.reason = reason


class MalformedMove(MoveRejected):
    def __init__(self, token: str):
        super().__init__(token, "Malformed move")


class IllegalMove(MoveRejected):
    def __init__(self, token: str):
        super().__init__(token, "Illegal move")


class PersistenceError(DuelChessError):
    pass


class CodecError(DuelChessError):
    pass


class ProtocolError(DuelChessError):
    pass


class PeerDisconnected(ProtocolError):
    def __init__(self, received: int = 0):
        if received:
            msg = f"Peer closed the connection mid-move ({received} of 4 bytes received)"
        else:
            msg = "Peer closed the connection"
        super().__init__(msg)
        self.received = received
