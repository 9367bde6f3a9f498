from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import GameGrid
    from .player import Player
    from .tiles import Tile


class FallingState:
    """Falling or Resting, re-derived every tick from the tile below."""

    def is_falling(self) -> bool:
        raise NotImplementedError

    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        raise NotImplementedError

    def drop(self, grid: GameGrid, tile: Tile, x: int, y: int) -> None:
        raise NotImplementedError


class Falling(FallingState):
    def is_falling(self) -> bool:
        return True

    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        # Objects in mid-air cannot be pushed.
        pass

    def drop(self, grid: GameGrid, tile: Tile, x: int, y: int) -> None:
        grid.drop(tile, x, y)

    def __repr__(self) -> str:
        return "FALLING"


class Resting(FallingState):
    def is_falling(self) -> bool:
        return False

    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        player.push_horizontal(grid, dx)

    def drop(self, grid: GameGrid, tile: Tile, x: int, y: int) -> None:
        pass

    def __repr__(self) -> str:
        return "RESTING"


# Stateless, so one instance of each is shared by every tile.
FALLING = Falling()
RESTING = Resting()


class FallStrategy:
    """Falling-state field carried by Stone and Box tiles."""

    def __init__(self, falling: FallingState) -> None:
        self.falling = falling

    def update(self, grid: GameGrid, tile: Tile, x: int, y: int) -> None:
        self.falling = grid.block_on_top_state(x, y + 1)
        self.falling.drop(grid, tile, x, y)

    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        self.falling.react_horizontal(grid, player, dx)

    def is_falling(self) -> bool:
        return self.falling.is_falling()
