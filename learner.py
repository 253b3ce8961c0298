# learner.py
# End-of-match weight update: replay the game and nudge each learnable ply's
# row towards the depth-scaled outcome.

import logging
import numpy as np

from config import config
from errors import IllegalMoveError
from evaluator import score
from features import board_features

logger = logging.getLogger("Learner")

def outcome_target(num_moves, winner_name, player_name, num_cells=config.NUM_CELLS):
    """
    Quicker wins are worth more, quicker losses cost more:
      win  -> num_cells - num_moves
      loss -> num_moves - num_cells
      draw -> 0
    """
    if winner_name is None:
        return 0
    if winner_name == player_name:
        return num_cells - num_moves
    return num_moves - num_cells

def update_row(row, features, target, learning_rate):
    """
    One gradient step on a single ply's row. Returns (new_row, prediction, error),
    or (None, prediction, error) when the step would leave the row non-finite.
    """
    prediction = score(row, features)
    error = target - prediction
    if not np.isfinite(error):
        return None, prediction, error

    new_row = np.array(row, dtype=np.float64)
    new_row[:config.NUM_FEATURES] += learning_rate * np.asarray(features, dtype=np.float64) * error
    new_row[config.NUM_FEATURES] += learning_rate * error
    if not np.all(np.isfinite(new_row)):
        return None, prediction, error
    return new_row, prediction, error

def learn_from_match(weights, learn_mask, board, player_name,
                     learning_rate=None, learn_from_draws=None):
    """
    Replays `board`'s history on a cleared clone and updates `weights` in place
    for every ply played by `player_name` whose `learn_mask` entry is True.
    Features are taken right after our move at that ply.

    Never raises on a bad history: illegal replay moves are logged and the ply
    is skipped. Returns the number of rows updated.
    """
    learning_rate = config.LEARNING_RATE if learning_rate is None else learning_rate
    learn_from_draws = config.LEARN_FROM_DRAWS if learn_from_draws is None else learn_from_draws

    history = board.get_move_history()
    winner = board.get_winner()
    winner_name = winner.name if winner is not None else None
    target = outcome_target(len(history), winner_name, player_name)

    if target == 0 and winner_name is None and not learn_from_draws:
        logger.info("Draw: skipping weight update.")
        return 0

    replay = board.clone()
    replay.clear()
    updated = 0

    for ply, move in enumerate(history):
        try:
            replay.make_move(move)
        except IllegalMoveError as e:
            logger.error(f"Replay failed at ply {ply}: {e}. Continuing with the next move.")
            continue

        if move.player.name != player_name or ply >= len(weights):
            continue
        if not learn_mask[ply]:
            logger.debug(f"Ply {ply}: heuristic move, not learning from it.")
            continue

        features = board_features(replay, player_name)
        new_row, prediction, error = update_row(weights[ply], features, target, learning_rate)
        if new_row is None:
            logger.warning(f"Ply {ply}: non-finite update (score={prediction}, error={error}); row left unchanged.")
            continue

        logger.debug(f"Ply {ply}: score={prediction:.4f} y={target} error={error:.4f} features={features.tolist()}")
        weights[ply] = new_row
        updated += 1

    logger.info(f"Learned from {updated} plies (y={target}, {len(history)} moves).")
    return updated
