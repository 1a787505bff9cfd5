"""
Wire codec for a single move.

A move travels as exactly MOVE_LEN ASCII bytes (origin square + destination square, e.g. b"e2e4").
There is no delimiter, no length prefix, no handshake and no acknowledgement: both peers must agree
that the move length is always 4 bytes. A peer that sends anything else desynchronises the stream
and there is no way to recover from it.

Decoding never fails. Whatever arrives is handed to the referee, whose rejection becomes the
player's pending error.
"""
from __future__ import annotations
import logging
import socket

from .errors import CodecError, PeerDisconnected

log = logging.getLogger("codec")

MOVE_LEN = 4

# Trailing bytes a fixed-size read may leave behind (NUL padding, newlines, other control chars).
_TRAILING = "".join(chr(c) for c in range(33)) + "\x7f"


def encode_token(token: str) -> bytes:
    try:
        frame = token.encode("ascii")
    except UnicodeEncodeError:
        raise CodecError(f"Move must be plain ASCII: {token!r}") from None
    if len(frame) != MOVE_LEN:
        raise CodecError(f"Move must be exactly {MOVE_LEN} characters (e.g. e2e4): {token!r}")
    return frame


def encode(origin: str, destination: str) -> bytes:
    """Encode an (origin, destination) pair of square names as one frame."""
    return encode_token(f"{origin}{destination}")


def decode(raw: bytes) -> str:
    """Turn a received frame back into a move token, trimming trailing padding/control bytes."""
    return raw.decode("utf-8", errors="replace").rstrip(_TRAILING)


def split(token: str) -> tuple[str, str]:
    return token[:2], token[2:MOVE_LEN]


# ---------------- Socket helpers -----------------
def read_frame(sock: socket.socket) -> bytes:
    """Block until exactly MOVE_LEN bytes arrive. A close before that raises PeerDisconnected."""
    buf = b""
    while len(buf) < MOVE_LEN:
        chunk = sock.recv(MOVE_LEN - len(buf))
        if not chunk:
            raise PeerDisconnected(received=len(buf))
        buf += chunk
    log.debug("Received frame %r", buf)
    return buf


def write_frame(sock: socket.socket, frame: bytes) -> None:
    if len(frame) != MOVE_LEN:
        raise CodecError(f"Refusing to send a {len(frame)}-byte frame")
    sock.sendall(frame)
    log.debug("Sent frame %r", frame)
