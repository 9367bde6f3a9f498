from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .grid import GameGrid


@dataclass
class Player:
    """Tracked player position.

    x and y only change in `move_to_tile`, which rewrites the grid cells in
    the same call so the PlayerTile and the coordinates never disagree.
    """

    x: int = 1
    y: int = 1

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def move(self, grid: GameGrid, dx: int, dy: int) -> None:
        self.move_to_tile(grid, self.x + dx, self.y + dy)

    def move_horizontal(self, grid: GameGrid, dx: int) -> None:
        grid.move_horizontal(self, dx)

    def move_vertical(self, grid: GameGrid, dy: int) -> None:
        grid.move_vertical(self, dy)

    def move_to_tile(self, grid: GameGrid, new_x: int, new_y: int) -> None:
        grid.move_player(self.x, self.y, new_x, new_y)
        self.x = new_x
        self.y = new_y

    def push_horizontal(self, grid: GameGrid, dx: int) -> None:
        grid.push_horizontal(self, dx)
