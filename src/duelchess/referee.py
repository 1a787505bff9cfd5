"""
Referee: the game state each peer owns, backed by a python-chess Board.

- Applies move tokens (4-character origin+destination, or 5-character UCI with a promotion piece).
  Rejections raise MalformedMove / IllegalMove and leave the side to move unchanged.
- A 4-character pawn move onto the last rank is promoted to a queen, since the wire frame has no
  room for a promotion suffix. Both peers do this identically, so their boards stay in step.
- Square queries for the renderer, status/result, PGN export, and save/load to a PGN file.

"""
from __future__ import annotations
import chess, chess.pgn, datetime, logging
from typing import Optional

from .errors import IllegalMove, MalformedMove, PersistenceError

log = logging.getLogger("Referee")


class Referee:
    """Chess referee around python-chess Board with PGN persistence."""
    def __init__(self, starting_fen: str | None = None):
        self.board = chess.Board(fen=starting_fen) if starting_fen else chess.Board()
        self._headers: dict[str, str] = {}

    # ---------------- Header Management -----------------
    def set_headers(self, event: str = "duelchess", site: str = "?", date: Optional[str] = None,
                    round_: str = "?", white: str = "?", black: str = "?") -> None:
        date = date or datetime.date.today().strftime("%Y.%m.%d")
        self._headers.update({
            "Event": event,
            "Site": site,
            "Date": date,
            "Round": round_,
            "White": white,
            "Black": black,
        })

    # ---------------- Queries -----------------
    @property
    def turn(self) -> chess.Color:
        return self.board.turn

    def piece_at(self, file: int, rank: int) -> chess.Piece | None:
        """Piece on the square at 0-based (file, rank), or None if it is empty."""
        return self.board.piece_at(chess.square(file, rank))

    def fen(self) -> str:
        return self.board.fen()

    def is_over(self) -> bool:
        return self.board.is_game_over()

    def status(self) -> str:
        if self.board.is_game_over():
            return self.board.result()
        return "*"

    # ---------------- Move Application -----------------
    def _parse(self, token: str) -> chess.Move:
        try:
            mv = chess.Move.from_uci(token)
        except ValueError:
            raise MalformedMove(token) from None
        if not mv:
            # null move "0000"
            raise MalformedMove(token)
        if mv.promotion is None and len(token) == 4:
            piece = self.board.piece_at(mv.from_square)
            if piece and piece.piece_type == chess.PAWN and chess.square_rank(mv.to_square) in (0, 7):
                mv = chess.Move(mv.from_square, mv.to_square, promotion=chess.QUEEN)
        return mv

    def apply(self, token: str) -> str:
        """Apply a move token to the board and return its SAN.

        Raises MalformedMove if the token is not a move at all and IllegalMove if it is
        not legal in the current position (including after the game has ended).
        """
        mv = self._parse(token)
        if mv not in self.board.legal_moves:
            raise IllegalMove(token)
        san = self.board.san(mv)
        self.board.push(mv)
        log.debug("Applied %s (%s)", token, san)
        return san

    # ---------------- PGN / Persistence -----------------
    def pgn(self) -> str:
        game = chess.pgn.Game.from_board(self.board)
        for k, v in self._headers.items():
            game.headers[k] = v
        game.headers["Result"] = self.status()
        exporter = chess.pgn.StringExporter(headers=True, variations=False, comments=False)
        return game.accept(exporter)

    def save(self, filename: str) -> None:
        try:
            with open(filename, "w", encoding="utf-8") as f:
                f.write(self.pgn())
                f.write("\n")
        except OSError as e:
            raise PersistenceError(f"Could not save game to {filename}: {e.strerror or e}") from e
        log.info("Saved game to %s", filename)

    def load(self, filename: str) -> None:
        """Replace the current game with the one stored in filename."""
        try:
            with open(filename, "r", encoding="utf-8") as f:
                game = chess.pgn.read_game(f)
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Could not load game from {filename}: {getattr(e, 'strerror', None) or e}") from e
        if game is None:
            raise PersistenceError(f"No game found in {filename}")
        if game.errors:
            raise PersistenceError(f"Corrupt game in {filename}: {game.errors[0]}")
        board = game.board()
        for mv in game.mainline_moves():
            board.push(mv)
        self.board = board
        self._headers = {k: v for k, v in game.headers.items() if k != "Result"}
        log.info("Loaded game from %s (%d plies)", filename, len(board.move_stack))
