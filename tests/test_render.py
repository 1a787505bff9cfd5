import unittest

from duelchess.referee import Referee
from duelchess.render import Perspective, render_board, render_status
from duelchess.style import DARK_SQ, LIGHT_SQ


class RenderBoardTests(unittest.TestCase):
    def test_rendering_is_repeatable(self):
        ref = Referee()
        ref.apply("e2e4")
        for perspective in Perspective:
            for color in (True, False):
                self.assertEqual(render_board(ref, perspective, color), render_board(ref, perspective, color))

    def test_white_bottom_layout(self):
        lines = render_board(Referee(), Perspective.WHITE_BOTTOM, color=False).splitlines()
        self.assertEqual(len(lines), 10)
        self.assertEqual(lines[0], "  ａｂｃｄｅｆｇｈ")
        self.assertEqual(lines[-1], lines[0])
        self.assertEqual(lines[1], "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜  8")
        self.assertEqual(lines[3], "6 " + "  · " * 4 + " 6")
        self.assertEqual(lines[8], "1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖  1")

    def test_black_bottom_is_mirrored(self):
        lines = render_board(Referee(), Perspective.BLACK_BOTTOM, color=False).splitlines()
        self.assertEqual(lines[0], "  ｈｇｆｅｄｃｂａ")
        self.assertEqual(lines[1], "1 ♖ ♘ ♗ ♔ ♕ ♗ ♘ ♖  1")
        self.assertEqual(lines[3], "3 " + "  · " * 4 + " 3")
        self.assertEqual(lines[8], "8 ♜ ♞ ♝ ♚ ♛ ♝ ♞ ♜  8")

    def test_moves_show_up_in_both_projections(self):
        ref = Referee()
        ref.apply("e2e4")
        ref.apply("e7e5")
        white = render_board(ref, Perspective.WHITE_BOTTOM, color=False).splitlines()
        black = render_board(ref, Perspective.BLACK_BOTTOM, color=False).splitlines()
        # e is the fifth column from the left for white, the fourth for black
        self.assertEqual(white[5][2 + 4 * 2], "♙")  # rank 4
        self.assertEqual(white[4][2 + 4 * 2], "♟")  # rank 5
        self.assertEqual(black[4][2 + 3 * 2], "♙")
        self.assertEqual(black[5][2 + 3 * 2], "♟")

    def test_square_shading(self):
        white = render_board(Referee(), Perspective.WHITE_BOTTOM).splitlines()
        # a1 is dark, h1 is light
        self.assertTrue(white[8].startswith("1 " + DARK_SQ))
        self.assertIn(LIGHT_SQ, white[8])
        black = render_board(Referee(), Perspective.BLACK_BOTTOM).splitlines()
        # top-left from black's side is h1
        self.assertTrue(black[1].startswith("1 " + LIGHT_SQ))


class RenderStatusTests(unittest.TestCase):
    def test_side_to_move(self):
        ref = Referee()
        self.assertEqual(render_status(ref), "White to move:")
        ref.apply("e2e4")
        self.assertEqual(render_status(ref), "Black to move:")

    def test_check_and_mate(self):
        ref = Referee()
        for token in ["e2e4", "f7f6", "d2d4", "g7g5"]:
            ref.apply(token)
        ref.apply("d1h5")
        self.assertEqual(render_status(ref), "Game over: 1-0 (checkmate)")

        ref = Referee("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
        ref.apply("h1h8")
        self.assertEqual(render_status(ref), "Black to move (check):")


if __name__ == "__main__":
    unittest.main()
