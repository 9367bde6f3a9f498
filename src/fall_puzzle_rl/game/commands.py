from __future__ import annotations

import logging
from collections import deque
from enum import IntEnum
from typing import TYPE_CHECKING, Deque, Iterator

from .exceptions import InvalidCommandError

if TYPE_CHECKING:
    from .grid import GameGrid
    from .player import Player


logger = logging.getLogger(__name__)


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    def handle(self, grid: GameGrid, player: Player) -> None:
        # y grows downward, so UP is dy=-1
        if self is Direction.RIGHT:
            player.move_horizontal(grid, 1)
        elif self is Direction.LEFT:
            player.move_horizontal(grid, -1)
        elif self is Direction.UP:
            player.move_vertical(grid, -1)
        elif self is Direction.DOWN:
            player.move_vertical(grid, 1)


class CommandQueue:
    """FIFO of directional intents waiting for the next tick."""

    def __init__(self) -> None:
        self._pending: Deque[Direction] = deque()

    def push(self, direction: Direction) -> None:
        if not isinstance(direction, Direction):
            raise InvalidCommandError(f"Not a direction: {direction!r}")
        self._pending.append(direction)

    def drain(self) -> Iterator[Direction]:
        """Yield intents oldest first.

        Only the intents queued when draining starts are yielded; anything
        pushed meanwhile waits for the next drain.
        """
        count = len(self._pending)
        for _ in range(count):
            yield self._pending.popleft()

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
