# features.py
# Line scanning, tactical detection and the 8-feature summary of a board.

import numpy as np

from config import config
from data_structures import LineScan
from lines import LINES, LINE_X, LINE_Y, LINE_Z

MINE, THEIRS, EMPTY = 1, -1, 0

def board_occupancy(board, player_name):
    """Reads the board into a [5, 5, 5] int8 grid from `player_name`'s side."""
    size = config.BOARD_SIZE
    occupancy = np.zeros((size, size, size), dtype=np.int8)
    for pos in np.ndindex(occupancy.shape):
        owner = board.get_field_value(pos)
        if owner is None: continue
        occupancy[pos] = MINE if owner.name == player_name else THEIRS
    return occupancy

def scan_lines(board, player_name):
    return scan_occupancy(board_occupancy(board, player_name))

def scan_occupancy(occupancy):
    cells = occupancy[LINE_X, LINE_Y, LINE_Z]
    return LineScan(
        cells=cells,
        mine=np.count_nonzero(cells == MINE, axis=1),
        theirs=np.count_nonzero(cells == THEIRS, axis=1),
        empty=np.count_nonzero(cells == EMPTY, axis=1),
    )

def find_critical_cell(scan, for_self=True):
    """
    Returns the empty cell of a four-in-a-row, or None.

    for_self=True looks for our winning move, False for the cell that blocks the
    opponent. If several lines qualify, the last one in canonical line order wins.
    """
    if for_self:
        near_complete = (scan.mine >= 4) & (scan.theirs == 0)
    else:
        near_complete = (scan.theirs >= 4) & (scan.mine == 0)
    candidates = np.flatnonzero(near_complete & (scan.empty > 0))
    if candidates.size == 0:
        return None
    line_idx = int(candidates[-1])
    empty_slots = np.flatnonzero(scan.cells[line_idx] == EMPTY)
    return LINES[line_idx][int(empty_slots[-1])]

def extract_features(mine, theirs):
    """
    f[0..3]: lines with 4, 3, 2, 1 of my pieces and none of theirs.
    f[4..7]: the same for the opponent.
    Empty, full and mixed lines count for nothing.
    """
    mine, theirs = np.asarray(mine), np.asarray(theirs)
    features = np.zeros(config.NUM_FEATURES, dtype=np.int64)
    for k in range(1, 5):
        features[4 - k] = np.count_nonzero((mine == k) & (theirs == 0))
        features[8 - k] = np.count_nonzero((theirs == k) & (mine == 0))
    return features

def board_features(board, player_name):
    scan = scan_lines(board, player_name)
    return extract_features(scan.mine, scan.theirs)
