"""Key classes and the policy deciding which locks a key opens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Tuple

if TYPE_CHECKING:
    from .grid import GameGrid
    from .tiles import Tile


Color = Tuple[int, int, int]


class RemoveStrategy(Protocol):
    def check(self, tile: Tile) -> bool:
        ...


@dataclass(frozen=True)
class RemoveLockOfClass:
    """Selects lock tiles belonging to one key class."""

    key_class: int

    def check(self, tile: Tile) -> bool:
        return tile.is_lock_of_class(self.key_class)


REMOVE_LOCK_1 = RemoveLockOfClass(1)
REMOVE_LOCK_2 = RemoveLockOfClass(2)


@dataclass(frozen=True)
class KeyConfiguration:
    color: Color
    key_class: int
    remove_strategy: RemoveStrategy

    def remove_lock(self, grid: GameGrid) -> int:
        return grid.remove_lock(self.remove_strategy)


YELLOW_KEY = KeyConfiguration(color=(255, 204, 0), key_class=1, remove_strategy=REMOVE_LOCK_1)
CYAN_KEY = KeyConfiguration(color=(0, 204, 255), key_class=2, remove_strategy=REMOVE_LOCK_2)
