# data_structures.py

from collections import namedtuple

# One entry of a board's move history. `player` exposes `.name`;
# `position` is an (x, y, z) triple.
Move = namedtuple('Move', [
    'player',
    'position'
])

# Per-line view of a board from one player's side.
# Produced by features.scan_lines and consumed by the feature extractor
# and the tactical check. Never outlives a single evaluation.
LineScan = namedtuple('LineScan', [
    'cells',   # [109, 5] int8: 1 = mine, -1 = theirs, 0 = empty
    'mine',    # [109] number of my pieces per line
    'theirs',  # [109] number of opponent pieces per line
    'empty'    # [109] number of empty cells per line
])

# Summary of a finished match, returned by main.play_match.
MatchResult = namedtuple('MatchResult', [
    'winner_name',   # None for a draw
    'num_moves',
    'first_player'
])
