# lines.py
# The 109 winning lines of the 5x5x5 cube. Pure geometry, no board access.

import numpy as np
from config import config

def enumerate_lines(size=config.BOARD_SIZE):
    """
    Returns the winning lines in canonical order, each a tuple of 5 (x, y, z) cells.

    Order:
      1. for each x-layer: 5 rows along z, 5 rows along y, 2 diagonals   (60)
      2. for each y-layer: 5 rows along x, 2 diagonals                   (35)
      3. for each z-layer: 2 diagonals                                   (10)
      4. the 4 space diagonals between opposite corners                  (4)
    """
    last = size - 1
    lines = []

    for layer in range(size):
        for i in range(size):
            lines.append(tuple((layer, i, j) for j in range(size)))
        for j in range(size):
            lines.append(tuple((layer, i, j) for i in range(size)))
        lines.append(tuple((layer, i, i) for i in range(size)))
        lines.append(tuple((layer, i, last - i) for i in range(size)))

    for layer in range(size):
        for j in range(size):
            lines.append(tuple((k, layer, j) for k in range(size)))
        lines.append(tuple((i, layer, i) for i in range(size)))
        lines.append(tuple((i, layer, last - i) for i in range(size)))

    for layer in range(size):
        lines.append(tuple((i, i, layer) for i in range(size)))
        lines.append(tuple((i, last - i, layer) for i in range(size)))

    lines.append(tuple((i, i, i) for i in range(size)))
    lines.append(tuple((i, i, last - i) for i in range(size)))
    lines.append(tuple((last - i, i, i) for i in range(size)))
    lines.append(tuple((i, last - i, i) for i in range(size)))

    return tuple(lines)

LINES = enumerate_lines()
assert len(LINES) == config.NUM_LINES, f"expected {config.NUM_LINES} lines, got {len(LINES)}"

# [109, 5, 3] so a whole board can be gathered with one fancy-index:
#   occupancy[LINE_X, LINE_Y, LINE_Z] -> [109, 5]
LINE_INDEX = np.array(LINES, dtype=np.intp)
LINE_X, LINE_Y, LINE_Z = LINE_INDEX[..., 0], LINE_INDEX[..., 1], LINE_INDEX[..., 2]
