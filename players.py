from __future__ import annotations

import random
from typing import Optional, Tuple

class BasePlayer:
    """
    What the host sees of a player: a name, a move for a given board, and a
    notification with the final board once the match is over.
    """
    def __init__(self, name: str):
        self.name = name

    def get_name(self) -> str:
        return self.name

    def make_move(self, board) -> Tuple[int, int, int]:
        raise NotImplementedError

    def on_match_ends(self, board) -> None:
        pass

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"

# --- Random ---
class RandomPlayer(BasePlayer):
    def __init__(self, name: str = "RandomPlayer", seed: Optional[int] = None):
        super().__init__(name)
        self.rng = random.Random(seed)

    def make_move(self, board) -> Tuple[int, int, int]:
        legal = board.get_legal_moves()
        if not legal:
            return (0, 0, 0)
        return self.rng.choice(legal)
