"""ANSI escape codes used for the terminal board and messages."""
from __future__ import annotations

RESET = "\033[0m"
BOLD = "\033[1m"
RED_FG = "\033[31m"
BLACK_FG = "\033[30m"
LIGHT_SQ = "\033[47m"    # white
DARK_SQ = "\033[104m"    # bright blue
CLEAR = "\033[2J\033[H"


def paint(text: str, *codes: str, enabled: bool = True) -> str:
    if not enabled or not codes:
        return text
    return "".join(codes) + text + RESET
