"""
Per-game loop state and the transitions shared by the local and networked loops.

TurnState bundles the referee with the pending error so each loop iteration takes the state in and
hands it back, instead of keeping them in loose variables.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .errors import MoveRejected, PersistenceError
from .referee import Referee

log = logging.getLogger("session")

QUIT_TOKENS = frozenset({"q", "quit", "exit"})


@dataclass
class TurnState:
    referee: Referee = field(default_factory=Referee)
    pending_error: str | None = None


@dataclass(frozen=True)
class Command:
    """One parsed line of player input."""
    kind: str  # "quit" | "save" | "load" | "move" | "empty"
    arg: str | None = None


def parse_command(line: str | None, default_file: str = "game.txt") -> Command:
    if line is None:
        return Command("quit")
    words = line.split()
    if not words:
        return Command("empty")
    head = words[0]
    if head in QUIT_TOKENS:
        return Command("quit")
    if head in ("save", "load"):
        return Command(head, words[1] if len(words) > 1 else default_file)
    return Command("move", head)


def attempt_move(state: TurnState, token: str) -> bool:
    """Apply token to the state's referee. Returns True on success.

    Success clears the pending error, a rejection replaces it with the rejection's message.
    """
    try:
        san = state.referee.apply(token)
    except MoveRejected as e:
        log.info("Rejected move %r: %s", token, e.reason)
        state.pending_error = str(e)
        return False
    log.debug("Played %s", san)
    state.pending_error = None
    return True


def persist(state: TurnState, cmd: Command) -> None:
    """Run a save/load command. A failure becomes the pending error, success leaves it as it was."""
    try:
        if cmd.kind == "save":
            state.referee.save(cmd.arg)
        else:
            state.referee.load(cmd.arg)
    except PersistenceError as e:
        log.warning("%s", e)
        state.pending_error = str(e)
