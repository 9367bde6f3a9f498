from __future__ import annotations

import logging
from typing import Iterator, Sequence, Tuple

import numpy as np

from .exceptions import GridBoundsError, LevelShapeError, PlayerStartError, UnknownTileCodeError
from .falling import FallingState
from .keys import RemoveStrategy
from .player import Player
from .tiles import Air, PlayerTile, RawTile, Tile, transform_tile


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]
RawLevel = Sequence[Sequence[int]]


class GameGrid:
    """Rectangular grid of tiles built from a raw level.

    Cells are indexed ``grid[y, x]`` with y=0 at the top. Every access goes
    through a bounds check, so a level without boundary walls fails loudly
    instead of wrapping around.
    """

    def __init__(self, raw_level: RawLevel | np.ndarray) -> None:
        rows = [list(row) for row in raw_level]
        if not rows or not rows[0]:
            raise LevelShapeError("Level must have at least one row and one column")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise LevelShapeError(f"Row {y} has width {len(row)}, expected {width}")

        self.height = len(rows)
        self.width = width
        self.grid = np.empty((self.height, self.width), dtype=object)

        starts: list[Coordinate] = []
        for y, row in enumerate(rows):
            for x, code in enumerate(row):
                try:
                    tile = transform_tile(code)
                except UnknownTileCodeError:
                    raise UnknownTileCodeError(code, x, y) from None
                if isinstance(tile, PlayerTile):
                    starts.append((x, y))
                self.grid[y, x] = tile

        if len(starts) != 1:
            raise PlayerStartError(f"Level must contain exactly one player start, found {len(starts)}")
        self._player_start = starts[0]
        logger.debug("Loaded %dx%d level, player start at %s", self.width, self.height, self._player_start)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            raise GridBoundsError(f"Cell ({x}, {y}) is outside the {self.width}x{self.height} grid")

    def tile_at(self, x: int, y: int) -> Tile:
        self._check(x, y)
        return self.grid[y, x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self._check(x, y)
        self.grid[y, x] = tile

    def player_start(self) -> Coordinate:
        return self._player_start

    def make_player(self) -> Player:
        x, y = self._player_start
        return Player(x=x, y=y)

    # ---- gravity

    def block_on_top_state(self, x: int, y: int) -> FallingState:
        return self.tile_at(x, y).block_on_top_state()

    def drop(self, tile: Tile, x: int, y: int) -> None:
        self._check(x, y)
        self.set_tile(x, y + 1, tile)
        self.grid[y, x] = Air()

    def update(self) -> None:
        """Gravity pass: rows bottom to top, each row left to right."""
        for y in range(self.height - 1, -1, -1):
            for x in range(self.width):
                self.grid[y, x].update(self, x, y)

    # ---- player movement

    def move_horizontal(self, player: Player, dx: int) -> None:
        self.tile_at(player.x + dx, player.y).react_horizontal(self, player, dx)

    def move_vertical(self, player: Player, dy: int) -> None:
        self.tile_at(player.x, player.y + dy).react_vertical(self, player, dy)

    def move_player(self, x: int, y: int, new_x: int, new_y: int) -> None:
        self._check(x, y)
        self._check(new_x, new_y)
        self.grid[y, x] = Air()
        self.grid[new_y, new_x] = PlayerTile()

    def push_horizontal(self, player: Player, dx: int) -> None:
        x, y = player.x, player.y
        target_free = self.tile_at(x + dx + dx, y).is_air()
        supported = not self.tile_at(x + dx, y + 1).is_air()
        if not (target_free and supported):
            logger.debug("Push from (%d, %d) by %d refused (free=%s, supported=%s)", x, y, dx, target_free, supported)
            return
        self.grid[y, x + dx + dx] = self.grid[y, x + dx]
        player.move_to_tile(self, x + dx, y)

    # ---- keys and locks

    def remove_lock(self, remove_strategy: RemoveStrategy) -> int:
        removed = 0
        for y in range(self.height):
            for x in range(self.width):
                if remove_strategy.check(self.grid[y, x]):
                    self.grid[y, x] = Air()
                    removed += 1
        logger.debug("Removed %d lock(s) with %r", removed, remove_strategy)
        return removed

    # ---- read-only views

    def cells(self) -> Iterator[Tuple[int, int, Tile]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.grid[y, x]

    def count_player_markers(self) -> int:
        return sum(1 for _, _, tile in self.cells() if isinstance(tile, PlayerTile))

    def find_player_marker(self) -> Coordinate | None:
        for x, y, tile in self.cells():
            if isinstance(tile, PlayerTile):
                return x, y
        return None

    def clone_state(self) -> np.ndarray:
        state = np.zeros((self.height, self.width), dtype=np.int8)
        for x, y, tile in self.cells():
            state[y, x] = int(tile.raw_code())
        return state

    def count_codes(self, *codes: RawTile) -> int:
        return int(np.isin(self.clone_state(), [int(c) for c in codes]).sum())
