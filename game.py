import numpy as np
from abc import ABC, abstractmethod

from config import config
from data_structures import Move
from errors import IllegalMoveError
from lines import LINES

class Board(ABC):
    """
    The capabilities a player needs from the host's board. Hosts wrap their own
    board in this interface; CubeBoard below is the in-process implementation.
    """
    @abstractmethod
    def get_field_value(self, position):
        """None for an empty cell, otherwise the owning player (anything with a `.name`)."""

    @abstractmethod
    def clone(self): pass

    @abstractmethod
    def make_move(self, move):
        """Applies a Move. Raises IllegalMoveError without changing the board."""

    @abstractmethod
    def get_move_history(self): pass

    @abstractmethod
    def get_winner(self): pass

    @abstractmethod
    def clear(self): pass


# cell -> indices of the lines through it, used for the win check
_LINES_THROUGH = {}
for _idx, _line in enumerate(LINES):
    for _cell in _line:
        _LINES_THROUGH.setdefault(_cell, []).append(_idx)


class CubeBoard(Board):
    def __init__(self):
        self.size = config.BOARD_SIZE
        self.clear()

    def clear(self):
        # 0 = empty, 1 = first player to move, 2 = second
        self.grid = np.zeros((self.size, self.size, self.size), dtype=np.int8)
        self.players, self.history, self.winner = [], [], None
        return self

    def clone(self):
        other = CubeBoard.__new__(CubeBoard)
        other.size = self.size
        other.grid = self.grid.copy()
        other.players, other.history, other.winner = list(self.players), list(self.history), self.winner
        return other

    def get_field_value(self, position):
        slot = self.grid[self._check_position(position)]
        return None if slot == 0 else self.players[slot - 1]

    def get_move_history(self):
        return list(self.history)

    def get_winner(self):
        return self.winner

    def get_legal_moves(self):
        if self.winner is not None: return []
        return [tuple(int(c) for c in cell) for cell in zip(*np.where(self.grid == 0))]

    def is_full(self):
        return len(self.history) >= self.size ** 3

    def is_over(self):
        return self.winner is not None or self.is_full()

    def make_move(self, move):
        pos = self._check_position(move.position)
        if self.winner is not None:
            raise IllegalMoveError(pos, f"game already won by {self.winner.name}")
        if self.grid[pos] != 0:
            raise IllegalMoveError(pos, f"cell {pos} is occupied")
        if self.history and self.history[-1].player.name == move.player.name:
            raise IllegalMoveError(pos, f"{move.player.name} moved twice in a row")
        slot = self._slot_for(move.player, pos)

        self.grid[pos] = slot
        self.history.append(Move(move.player, pos))
        if self._completes_line(pos, slot):
            self.winner = move.player

    def _slot_for(self, player, pos):
        for i, known in enumerate(self.players):
            if known.name == player.name: return i + 1
        if len(self.players) == 2:
            raise IllegalMoveError(pos, f"{player.name} is not playing this match")
        self.players.append(player)
        return len(self.players)

    def _check_position(self, position):
        try:
            pos = tuple(int(c) for c in position)
        except (TypeError, ValueError):
            raise IllegalMoveError((), f"malformed position {position!r}") from None
        if len(pos) != 3 or not all(0 <= c < self.size for c in pos):
            raise IllegalMoveError(pos, f"position {pos} is off the board")
        return pos

    def _completes_line(self, pos, slot):
        for idx in _LINES_THROUGH[pos]:
            if all(self.grid[cell] == slot for cell in LINES[idx]):
                return True
        return False
