"""
Terminal I/O for the game loops.

Every loop talks to the player through a Console, so tests can drive a game by handing it
StringIO streams instead of the real stdin/stdout.
"""
from __future__ import annotations
import sys
from typing import TextIO

from .referee import Referee
from .render import Perspective, render_board, render_status
from .style import BOLD, CLEAR, RED_FG, paint


class Console:
    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None,
                 color: bool = True, clear_screen: bool = True):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.color = color
        self.clear_screen = clear_screen

    def write(self, text: str = "", end: str = "\n") -> None:
        self.stdout.write(text + end)
        self.stdout.flush()

    def show(self, referee: Referee, perspective: Perspective, pending_error: str | None = None) -> None:
        """Redraw the screen: pending error (if any), board, status line."""
        if self.clear_screen:
            self.stdout.write(CLEAR)
        if pending_error:
            self.write(f"\n{paint(pending_error, RED_FG, enabled=self.color)}\n")
        self.write(render_board(referee, perspective, color=self.color))
        self.write("\n" + paint(render_status(referee), BOLD, enabled=self.color))

    def prompt(self) -> str | None:
        """Ask for a line of input. Returns the trimmed line, or None at end of input."""
        self.write("> ", end="")
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()
