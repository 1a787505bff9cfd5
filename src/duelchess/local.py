"""Single-process game: both players share one terminal and the board is always drawn white-bottom."""
from __future__ import annotations
import logging

from .config import SETTINGS, Settings
from .console import Console
from .render import Perspective
from .session import TurnState, attempt_move, parse_command, persist

log = logging.getLogger("Local")


def step_local(state: TurnState, line: str | None, settings: Settings = SETTINGS) -> bool:
    """Feed one line of input into the game. Returns False once the player quits."""
    cmd = parse_command(line, settings.save_file)
    if cmd.kind == "quit":
        return False
    if cmd.kind in ("save", "load"):
        persist(state, cmd)
    elif cmd.kind == "move":
        attempt_move(state, cmd.arg)
    return True


def play_local(console: Console, settings: Settings = SETTINGS, state: TurnState | None = None) -> int:
    state = state or TurnState()
    state.referee.set_headers(event="duelchess local game")
    log.info("Starting local game")
    while True:
        console.show(state.referee, Perspective.WHITE_BOTTOM, state.pending_error)
        if not step_local(state, console.prompt(), settings):
            break
    log.info("Local game ended (%s)", state.referee.status())
    return 0
