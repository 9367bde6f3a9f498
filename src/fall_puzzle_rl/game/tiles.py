from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Dict, Tuple

import numpy as np

from .exceptions import UnknownTileCodeError
from .falling import FALLING, RESTING, FallingState, FallStrategy
from .keys import CYAN_KEY, YELLOW_KEY, KeyConfiguration

if TYPE_CHECKING:
    from .grid import GameGrid
    from .player import Player


class RawTile(IntEnum):
    AIR = 0
    FLUX = 1
    UNBREAKABLE = 2
    PLAYER = 3
    STONE = 4
    FALLING_STONE = 5
    BOX = 6
    FALLING_BOX = 7
    KEY1 = 8
    LOCK1 = 9
    KEY2 = 10
    LOCK2 = 11


# key class -> (key code, lock code)
KEY_CLASS_CODES: Dict[int, Tuple[RawTile, RawTile]] = {
    1: (RawTile.KEY1, RawTile.LOCK1),
    2: (RawTile.KEY2, RawTile.LOCK2),
}


class Tile:
    """Occupant of one grid cell.

    The defaults describe an inert, solid tile: it is not air, not a lock,
    supports whatever sits on it and blocks the player. Variants override
    only the reactions that differ.
    """

    def is_air(self) -> bool:
        return False

    def is_lock_of_class(self, key_class: int) -> bool:
        return False

    def block_on_top_state(self) -> FallingState:
        return RESTING

    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        pass

    def react_vertical(self, grid: GameGrid, player: Player, dy: int) -> None:
        pass

    def update(self, grid: GameGrid, x: int, y: int) -> None:
        pass

    def raw_code(self) -> RawTile:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Air(Tile):
    def is_air(self) -> bool:
        return True

    def block_on_top_state(self) -> FallingState:
        return FALLING

    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        player.move(grid, dx, 0)

    def react_vertical(self, grid: GameGrid, player: Player, dy: int) -> None:
        player.move(grid, 0, dy)

    def raw_code(self) -> RawTile:
        return RawTile.AIR


class Flux(Tile):
    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        player.move(grid, dx, 0)

    def react_vertical(self, grid: GameGrid, player: Player, dy: int) -> None:
        player.move(grid, 0, dy)

    def raw_code(self) -> RawTile:
        return RawTile.FLUX


class Unbreakable(Tile):
    def raw_code(self) -> RawTile:
        return RawTile.UNBREAKABLE


class PlayerTile(Tile):
    def raw_code(self) -> RawTile:
        return RawTile.PLAYER


class FallingBlock(Tile):
    """Stone or Box: a gravity-affected tile that can be pushed sideways."""

    resting_code = RawTile.STONE
    falling_code = RawTile.FALLING_STONE

    def __init__(self, falling: FallingState = RESTING) -> None:
        self.fall_strategy = FallStrategy(falling)

    def is_falling(self) -> bool:
        return self.fall_strategy.is_falling()

    def block_on_top_state(self) -> FallingState:
        return FALLING if self.is_falling() else RESTING

    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        self.fall_strategy.react_horizontal(grid, player, dx)

    def update(self, grid: GameGrid, x: int, y: int) -> None:
        self.fall_strategy.update(grid, self, x, y)

    def raw_code(self) -> RawTile:
        return self.falling_code if self.is_falling() else self.resting_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.fall_strategy.falling!r})"


class Stone(FallingBlock):
    resting_code = RawTile.STONE
    falling_code = RawTile.FALLING_STONE


class Box(FallingBlock):
    resting_code = RawTile.BOX
    falling_code = RawTile.FALLING_BOX


class Key(Tile):
    def __init__(self, key_conf: KeyConfiguration) -> None:
        self.key_conf = key_conf

    def react_horizontal(self, grid: GameGrid, player: Player, dx: int) -> None:
        self.key_conf.remove_lock(grid)
        player.move(grid, dx, 0)

    def react_vertical(self, grid: GameGrid, player: Player, dy: int) -> None:
        self.key_conf.remove_lock(grid)
        player.move(grid, 0, dy)

    def raw_code(self) -> RawTile:
        return KEY_CLASS_CODES[self.key_conf.key_class][0]

    def __repr__(self) -> str:
        return f"Key({self.key_conf.key_class})"


class Lock(Tile):
    def __init__(self, key_conf: KeyConfiguration) -> None:
        self.key_conf = key_conf

    def is_lock_of_class(self, key_class: int) -> bool:
        return self.key_conf.key_class == key_class

    def raw_code(self) -> RawTile:
        return KEY_CLASS_CODES[self.key_conf.key_class][1]

    def __repr__(self) -> str:
        return f"Lock({self.key_conf.key_class})"


def transform_tile(code: object) -> Tile:
    """Build a fresh tile for a raw level code."""
    if isinstance(code, bool) or not isinstance(code, (int, np.integer)):
        raise UnknownTileCodeError(code)
    try:
        tile = RawTile(int(code))
    except ValueError:
        raise UnknownTileCodeError(code) from None

    if tile == RawTile.AIR:
        return Air()
    if tile == RawTile.FLUX:
        return Flux()
    if tile == RawTile.UNBREAKABLE:
        return Unbreakable()
    if tile == RawTile.PLAYER:
        return PlayerTile()
    if tile == RawTile.STONE:
        return Stone(RESTING)
    if tile == RawTile.FALLING_STONE:
        return Stone(FALLING)
    if tile == RawTile.BOX:
        return Box(RESTING)
    if tile == RawTile.FALLING_BOX:
        return Box(FALLING)
    if tile == RawTile.KEY1:
        return Key(YELLOW_KEY)
    if tile == RawTile.LOCK1:
        return Lock(YELLOW_KEY)
    if tile == RawTile.KEY2:
        return Key(CYAN_KEY)
    if tile == RawTile.LOCK2:
        return Lock(CYAN_KEY)
    raise UnknownTileCodeError(code)
