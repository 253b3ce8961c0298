import unittest
import random
import numpy as np
import sys
import os

# --- Path Setup ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.insert(0, project_root)

# --- Project Imports ---
from features import extract_features, scan_lines, find_critical_cell, board_features
from lines import LINES
from fakes import FreeBoard, NamedPlayer

ME = NamedPlayer("TequilaBot")
OPP = NamedPlayer("Opponent")

def random_board(seed, num_pieces):
    rng = random.Random(seed)
    cells = [(x, y, z) for x in range(5) for y in range(5) for z in range(5)]
    rng.shuffle(cells)
    board = FreeBoard()
    for i, cell in enumerate(cells[:num_pieces]):
        board.place(ME if i % 2 == 0 else OPP, cell)
    return board

class TestFeatureExtraction(unittest.TestCase):

    def test_mixed_lines_example(self):
        """3 mine, 2 mine, 1 theirs and one mixed line, everything else empty."""
        mine = np.zeros(109, dtype=int)
        theirs = np.zeros(109, dtype=int)
        mine[0], mine[1] = 3, 2
        theirs[2] = 1
        mine[3], theirs[3] = 1, 1
        np.testing.assert_array_equal(extract_features(mine, theirs), [0, 1, 1, 0, 0, 0, 0, 1])

    def test_full_lines_are_ignored(self):
        features = extract_features([5, 0, 4, 0], [0, 5, 0, 4])
        np.testing.assert_array_equal(features, [1, 0, 0, 0, 1, 0, 0, 0])

    def test_empty_board(self):
        np.testing.assert_array_equal(board_features(FreeBoard(), ME.name), np.zeros(8))

    def test_single_center_piece(self):
        board = FreeBoard().place(ME, (2, 2, 2))
        np.testing.assert_array_equal(board_features(board, ME.name), [0, 0, 0, 13, 0, 0, 0, 0])
        # the same board from the other side
        np.testing.assert_array_equal(board_features(board, OPP.name), [0, 0, 0, 0, 0, 0, 0, 13])

    def test_bounds_on_random_boards(self):
        for seed in range(20):
            board = random_board(seed, num_pieces=seed * 6)
            scan = scan_lines(board, ME.name)
            self.assertTrue(np.all(scan.mine + scan.theirs <= 5))
            np.testing.assert_array_equal(scan.mine + scan.theirs + scan.empty, np.full(109, 5))
            features = extract_features(scan.mine, scan.theirs)
            self.assertTrue(np.all(features >= 0))
            self.assertTrue(np.all(features <= 109))
            self.assertLessEqual(int(features.sum()), 109)

class TestCriticalCell(unittest.TestCase):

    def test_winning_cell(self):
        board = FreeBoard().place(ME, (0, 0, 0), (0, 0, 1), (0, 0, 2), (0, 0, 3))
        scan = scan_lines(board, ME.name)
        self.assertEqual(find_critical_cell(scan, for_self=True), (0, 0, 4))
        self.assertIsNone(find_critical_cell(scan, for_self=False))

    def test_blocking_cell(self):
        board = FreeBoard().place(OPP, (1, 0, 3), (1, 1, 3), (1, 3, 3), (1, 4, 3))
        scan = scan_lines(board, ME.name)
        self.assertIsNone(find_critical_cell(scan, for_self=True))
        self.assertEqual(find_critical_cell(scan, for_self=False), (1, 2, 3))

    def test_blocked_line_is_not_critical(self):
        board = FreeBoard().place(ME, (0, 0, 0), (0, 0, 1), (0, 0, 2), (0, 0, 3))
        board.place(OPP, (0, 0, 4))
        self.assertIsNone(find_critical_cell(scan_lines(board, ME.name), for_self=True))

    def test_last_line_in_order_wins(self):
        # row (0,0,*) is line 0, missing (0,0,4);
        # the space diagonal (0,4,0)->(4,0,4) is the last line, missing (0,4,0)
        board = FreeBoard().place(ME, (0, 0, 0), (0, 0, 1), (0, 0, 2), (0, 0, 3))
        board.place(ME, (1, 3, 1), (2, 2, 2), (3, 1, 3), (4, 0, 4))
        self.assertEqual(LINES.index(tuple((i, 4 - i, i) for i in range(5))), 108)
        self.assertEqual(find_critical_cell(scan_lines(board, ME.name), for_self=True), (0, 4, 0))

        # row (1,0,*) is line 12, missing (1,0,0)
        board = FreeBoard().place(ME, (0, 0, 0), (0, 0, 1), (0, 0, 2), (0, 0, 3))
        board.place(ME, (1, 0, 1), (1, 0, 2), (1, 0, 3), (1, 0, 4))
        self.assertEqual(LINES.index(tuple((1, 0, j) for j in range(5))), 12)
        self.assertEqual(find_critical_cell(scan_lines(board, ME.name), for_self=True), (1, 0, 0))

    def test_same_cell_reached_from_two_lines(self):
        board = FreeBoard().place(ME, (0, 0, 0), (0, 0, 1), (0, 0, 2), (0, 0, 3))
        board.place(ME, (1, 0, 4), (2, 0, 4), (3, 0, 4), (4, 0, 4))
        self.assertEqual(find_critical_cell(scan_lines(board, ME.name), for_self=True), (0, 0, 4))

if __name__ == '__main__':
    unittest.main(verbosity=2)
