from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from checkers.board import BOARD_WIDTH, Board  # noqa: E402
from checkers.errors import OutOfBoundsError  # noqa: E402
from checkers.pieces import Color, Piece  # noqa: E402


class BoardLayoutTests(unittest.TestCase):
    def test_board_has_64_fixed_cells(self) -> None:
        board = Board()
        cells = list(board.cells())
        self.assertEqual(len(cells), BOARD_WIDTH * BOARD_WIDTH)
        self.assertEqual(len({cell.coords for cell in cells}), 64)
        self.assertIs(board.cell(3, 5), board.grid[5][3])
        self.assertEqual(board.cell(3, 5).coords, (3, 5))

    def test_initial_layout_places_twelve_pieces_per_side_on_dark_cells(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE)
        black = board.pieces(Color.BLACK)
        self.assertEqual(len(white), 12)
        self.assertEqual(len(black), 12)
        for piece in white + black:
            self.assertTrue(piece.position.is_dark)
            self.assertFalse(piece.is_king)
        self.assertTrue(all(p.position.y <= 2 for p in white))
        self.assertTrue(all(p.position.y >= 5 for p in black))

    def test_initial_rows_snapshot(self) -> None:
        self.assertEqual(
            Board.initial().to_rows(),
            (
                ".w.w.w.w",
                "w.w.w.w.",
                ".w.w.w.w",
                "........",
                "........",
                "b.b.b.b.",
                ".b.b.b.b",
                "b.b.b.b.",
            ),
        )


    def test_str_dumps_rows(self) -> None:
        lines = str(Board.initial()).splitlines()
        self.assertEqual(len(lines), 8)
        self.assertEqual(lines[0], ". w . w . w . w")
        self.assertEqual(lines[7], "b . b . b . b .")
    def test_out_of_range_coordinates_are_rejected(self) -> None:
        board = Board()
        for x, y in ((-1, 0), (0, -1), (8, 0), (0, 8)):
            self.assertFalse(board.in_bounds(x, y))
            with self.assertRaises(OutOfBoundsError):
                board.cell(x, y)
        with self.assertRaises(ValueError):
            board.piece_at(8, 8)


class CellLinkTests(unittest.TestCase):
    def test_set_piece_links_both_ways(self) -> None:
        board = Board()
        piece = board.place(Piece(Color.WHITE), 1, 0)
        cell = board.cell(1, 0)
        self.assertIs(cell.piece, piece)
        self.assertIs(piece.position, cell)

    def test_moving_a_piece_detaches_it_from_the_old_cell(self) -> None:
        board = Board()
        piece = board.place(Piece(Color.WHITE), 1, 0)
        board.cell(2, 1).set_piece(piece)
        self.assertIsNone(board.piece_at(1, 0))
        self.assertIs(board.piece_at(2, 1), piece)
        self.assertIs(piece.position, board.cell(2, 1))
        self.assertEqual(len(board.pieces()), 1)

    def test_replacing_an_occupant_clears_its_position(self) -> None:
        board = Board()
        old = board.place(Piece(Color.BLACK), 2, 1)
        new = board.place(Piece(Color.WHITE), 2, 1)
        self.assertIsNone(old.position)
        self.assertIs(new.position, board.cell(2, 1))

    def test_remove_empties_cell(self) -> None:
        board = Board()
        piece = board.place(Piece(Color.BLACK), 2, 1)
        self.assertIs(board.remove(2, 1), piece)
        self.assertIsNone(piece.position)
        self.assertIsNone(board.piece_at(2, 1))
        self.assertIsNone(board.remove(2, 1))


class PieceTests(unittest.TestCase):
    def test_promotion_is_monotonic(self) -> None:
        piece = Piece(Color.BLACK)
        self.assertFalse(piece.is_king)
        self.assertTrue(piece.promote())
        self.assertTrue(piece.is_king)
        self.assertFalse(piece.promote())
        self.assertTrue(piece.is_king)

    def test_forward_direction_and_opponent(self) -> None:
        self.assertEqual(Piece(Color.WHITE).forward, 1)
        self.assertEqual(Piece(Color.BLACK).forward, -1)
        self.assertIs(Color.WHITE.opponent, Color.BLACK)
        self.assertIs(Color.BLACK.opponent, Color.WHITE)


if __name__ == "__main__":
    unittest.main()
