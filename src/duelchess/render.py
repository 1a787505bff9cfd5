"""
Board projection renderer.

Draws the position as an 8x8 grid seen from white's side (rank 8 at the top, files a..h) or from
black's side (rank 1 at the top, files h..a). File labels sit on a header and a footer row, rank
labels on both ends of every row. A square is light when (file + rank) % 2 == 0, with file counted
from 0 and rank from 1.

Output depends only on the position, the perspective and the color flag.
"""
from __future__ import annotations
import enum

import chess

from .referee import Referee
from .style import BLACK_FG, DARK_SQ, LIGHT_SQ, paint

FILE_LABELS = "ａｂｃｄｅｆｇｈ"  # full-width, two columns each like a cell


class Perspective(enum.Enum):
    WHITE_BOTTOM = "white"
    BLACK_BOTTOM = "black"

    @classmethod
    def for_side(cls, side: chess.Color) -> "Perspective":
        return cls.WHITE_BOTTOM if side == chess.WHITE else cls.BLACK_BOTTOM


def _cell(piece: chess.Piece | None, light: bool, color: bool) -> str:
    if color:
        sym = piece.unicode_symbol() if piece else " "
        return paint(f"{sym} ", LIGHT_SQ if light else DARK_SQ, BLACK_FG)
    if piece:
        return f"{piece.unicode_symbol()} "
    return "  " if light else "· "


def render_board(referee: Referee, perspective: Perspective = Perspective.WHITE_BOTTOM, color: bool = True) -> str:
    if perspective is Perspective.WHITE_BOTTOM:
        ranks = range(8, 0, -1)
        files = range(8)
    else:
        ranks = range(1, 9)
        files = range(7, -1, -1)
    labels = "  " + "".join(FILE_LABELS[f] for f in files)

    lines = [labels]
    for rank in ranks:
        row = [f"{rank} "]
        for file in files:
            light = (file + rank) % 2 == 0
            row.append(_cell(referee.piece_at(file, rank - 1), light, color))
        row.append(f" {rank}")
        lines.append("".join(row))
    lines.append(labels)
    return "\n".join(lines)


def render_status(referee: Referee) -> str:
    """One line under the board: who moves next, or how the game ended."""
    board = referee.board
    outcome = board.outcome()
    if outcome is not None:
        reason = outcome.termination.name.lower().replace("_", " ")
        return f"Game over: {outcome.result()} ({reason})"
    side = chess.COLOR_NAMES[board.turn].capitalize()
    if board.is_check():
        return f"{side} to move (check):"
    return f"{side} to move:"
