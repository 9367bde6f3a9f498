from __future__ import annotations

from typing import List


Level = List[List[int]]

# Walled 8x6 room: player top-left above a stone column, a resting box,
# a yellow key at the bottom left and its lock guarding the right shaft.
DEFAULT_LEVEL: Level = [
    [2, 2, 2, 2, 2, 2, 2, 2],
    [2, 3, 0, 1, 1, 2, 0, 2],
    [2, 4, 2, 6, 1, 2, 0, 2],
    [2, 8, 4, 1, 1, 2, 0, 2],
    [2, 4, 1, 1, 1, 9, 0, 2],
    [2, 2, 2, 2, 2, 2, 2, 2],
]
