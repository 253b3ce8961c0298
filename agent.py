# agent.py

import logging
import math
import numpy as np

from config import config
from data_structures import Move
from errors import IllegalMoveError
from evaluator import score
from features import board_features, scan_lines, find_critical_cell
from learner import learn_from_match
from players import BasePlayer
from weights_store import WeightsStore, initial_weights

logger = logging.getLogger("TequilaBot")

class TequilaBot(BasePlayer):
    """
    One-ply player for 5x5x5 tic-tac-toe.

    Every ply has its own row of 9 weights. A move is chosen by playing each
    empty cell on a cloned board and scoring the result with the row for the
    current ply, unless a heuristic applies first (center opening, immediate
    win, optionally blocking the opponent's four). Plies decided by a
    heuristic are masked out of learning.
    """
    def __init__(self, name=None, weights_path=None, learning_rate=None,
                 defensive_block=None, learning_enabled=None, learn_from_draws=None):
        super().__init__(name or config.PLAYER_NAME)
        self.store = WeightsStore(weights_path)
        self.learning_rate = config.LEARNING_RATE if learning_rate is None else learning_rate
        self.defensive_block = config.ENABLE_DEFENSIVE_BLOCK if defensive_block is None else defensive_block
        self.learning_enabled = config.ENABLE_LEARNING if learning_enabled is None else learning_enabled
        self.learn_from_draws = config.LEARN_FROM_DRAWS if learn_from_draws is None else learn_from_draws

        self.weights = initial_weights()
        self.learn_mask = np.ones(config.NUM_CELLS, dtype=bool)
        self.weights_loaded = False
        self.last_scores = None

    # ------------------------------------------------------------------
    #                          Host contract
    # ------------------------------------------------------------------
    def get_name(self):
        return self.name

    def make_move(self, board):
        if not self.weights_loaded:
            self.load_weights()

        ply = len(board.get_move_history())
        if ply <= 1:
            # our first move of a new match
            self.reset_mask()

        if ply == 0:
            self.learn_mask[0] = False
            return config.CENTER

        try:
            scan = scan_lines(board, self.name)
            winning_cell = find_critical_cell(scan, for_self=True)
            if winning_cell is not None:
                logger.debug(f"Ply {ply}: winning at {winning_cell}.")
                self._mark_heuristic(ply)
                return winning_cell

            if self.defensive_block:
                blocking_cell = find_critical_cell(scan, for_self=False)
                if blocking_cell is not None:
                    logger.debug(f"Ply {ply}: blocking at {blocking_cell}.")
                    self._mark_heuristic(ply)
                    return blocking_cell

            return self.select_move(board)
        except Exception as e:
            logger.exception(f"Move selection failed at ply {ply}: {e}")
            return self._first_empty_cell(board)

    def on_match_ends(self, board):
        try:
            if not self.learning_enabled:
                logger.info("Learning disabled; weights left untouched.")
                return
            if not self.weights_loaded:
                self.load_weights()
            try:
                learn_from_match(self.weights, self.learn_mask, board, self.name,
                                 learning_rate=self.learning_rate,
                                 learn_from_draws=self.learn_from_draws)
            except Exception as e:
                logger.exception(f"Learning step failed, saving what was learned so far: {e}")
            self.store.save(self.weights)
        finally:
            self.reset_mask()

    # ------------------------------------------------------------------
    #                          Model state
    # ------------------------------------------------------------------
    def load_weights(self):
        loaded = self.store.load()
        if loaded is not None:
            self.weights = loaded
        self.weights_loaded = True
        self.reset_mask()

    def reset_mask(self):
        self.learn_mask[:] = True

    def _mark_heuristic(self, ply):
        if 0 <= ply < len(self.learn_mask):
            self.learn_mask[ply] = False

    # ------------------------------------------------------------------
    #                          Move selection
    # ------------------------------------------------------------------
    def select_move(self, board):
        """
        Scores every empty cell with this ply's row and returns the best one.
        Scanned in (k, i, j) order; only a strictly greater score replaces the
        current candidate, so ties go to the earliest cell.
        """
        ply = len(board.get_move_history())
        row = self.weights[min(ply, len(self.weights) - 1)]
        size = config.BOARD_SIZE
        scores = np.zeros((size, size, size), dtype=np.float64)
        best_cell, best_score = None, -math.inf

        for cell in np.ndindex(scores.shape):
            if board.get_field_value(cell) is not None:
                scores[cell] = -math.inf
                continue
            trial = board.clone()
            try:
                trial.make_move(Move(self, cell))
            except IllegalMoveError:
                scores[cell] = -math.inf
                continue
            scores[cell] = score(row, board_features(trial, self.name))
            if best_cell is None or scores[cell] > best_score:
                best_cell, best_score = cell, scores[cell]

        self.last_scores = scores
        if best_cell is None:
            logger.error(f"No playable cell at ply {ply}.")
            return self._first_empty_cell(board)
        return best_cell

    def _first_empty_cell(self, board):
        size = config.BOARD_SIZE
        for cell in np.ndindex(size, size, size):
            if board.get_field_value(cell) is None:
                return cell
        return config.CENTER
