# main.py
# Training harness: TequilaBot against a random opponent on the in-process board.

import argparse
import logging
from collections import Counter

from tqdm import tqdm

from config import config
from agent import TequilaBot
from data_structures import Move, MatchResult
from errors import IllegalMoveError
from game import CubeBoard
from logger_config import setup_logging
from players import RandomPlayer

logger = logging.getLogger("Main")

def play_match(board, first, second):
    """Plays one match to the end on `board`, then notifies both players."""
    players = (first, second)
    turn = 0
    while not board.is_over():
        player = players[turn % 2]
        position = player.make_move(board.clone())
        try:
            board.make_move(Move(player, position))
        except IllegalMoveError as e:
            # the host rejects the game: the offender forfeits
            logger.error(f"{player.get_name()} played an illegal move: {e}. Match forfeited.")
            board.winner = players[(turn + 1) % 2]
            break
        turn += 1

    for player in players:
        player.on_match_ends(board.clone())

    winner = board.get_winner()
    return MatchResult(
        winner_name=winner.name if winner is not None else None,
        num_moves=len(board.get_move_history()),
        first_player=first.get_name(),
    )

def train(num_matches, agent, opponent):
    tally = Counter()
    bar = tqdm(range(num_matches), desc="Matches", dynamic_ncols=True)
    for match_idx in bar:
        # alternate who opens
        first, second = (agent, opponent) if match_idx % 2 == 0 else (opponent, agent)
        result = play_match(CubeBoard(), first, second)
        if result.winner_name is None:
            tally['draw'] += 1
        elif result.winner_name == agent.get_name():
            tally['win'] += 1
        else:
            tally['loss'] += 1
        logger.info(f"Match {match_idx + 1}: first={result.first_player} winner={result.winner_name or 'draw'} moves={result.num_moves}")
        bar.set_postfix(win=tally['win'], loss=tally['loss'], draw=tally['draw'])
    return tally

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Train TequilaBot against a random player.")
    parser.add_argument("--matches", type=int, default=config.NUM_TRAINING_MATCHES)
    parser.add_argument("--weights", default=config.WEIGHTS_FILE, help="weight file to load and update")
    parser.add_argument("--seed", type=int, default=config.RANDOM_SEED)
    parser.add_argument("--log-file", default=config.LOG_FILE)
    parser.add_argument("--defensive", action="store_true", help="block the opponent's four-in-a-row")
    parser.add_argument("--plot", action="store_true", help="save a heatmap of the final weights")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_file, level=logging.DEBUG if args.verbose else logging.INFO)
    logger.info(f"Config: {config.CURRENT_CONFIG} | matches={args.matches} | weights={args.weights} | learning_rate={config.LEARNING_RATE}")

    agent = TequilaBot(weights_path=args.weights, defensive_block=args.defensive or None)
    opponent = RandomPlayer(seed=args.seed)
    tally = train(args.matches, agent, opponent)
    summary = f"Finished {args.matches} matches: {tally['win']} won, {tally['loss']} lost, {tally['draw']} drawn."
    logger.info(summary)
    print(summary)

    if args.plot:
        from visualize import plot_weights
        print(f"Weight heatmap: {plot_weights(agent.weights)}")
    return tally

if __name__ == "__main__":
    main()
