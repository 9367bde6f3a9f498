from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .commands import CommandQueue, Direction
from .grid import GameGrid
from .levels import DEFAULT_LEVEL, Level
from .tiles import RawTile


logger = logging.getLogger(__name__)


class Action(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    NONE = 4

    def direction(self) -> Optional[Direction]:
        if self is Action.NONE:
            return None
        return Direction(int(self))


@dataclass
class GameConfig:
    level: Level = field(default_factory=lambda: copy.deepcopy(DEFAULT_LEVEL))
    fps: int = 30
    max_episode_steps: int = 500


class FallPuzzleGame:
    """Simulation context: grid, player and pending input for one level."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.commands = CommandQueue()
        self.grid = GameGrid(self.config.level)
        self.player = self.grid.make_player()
        self.tick_count = 0
        self.locks_removed_total = 0

    def reset(self) -> None:
        self.commands.clear()
        self.grid = GameGrid(self.config.level)
        self.player = self.grid.make_player()
        self.tick_count = 0
        self.locks_removed_total = 0

    def push_input(self, direction: Direction) -> None:
        self.commands.push(direction)

    def _lock_count(self) -> int:
        return self.grid.count_codes(RawTile.LOCK1, RawTile.LOCK2)

    def advance(self) -> None:
        """Run one tick: apply queued intents in arrival order, then gravity."""
        locks_before = self._lock_count()
        handled = 0
        for direction in self.commands.drain():
            direction.handle(self.grid, self.player)
            handled += 1
        self.grid.update()
        self.tick_count += 1
        self.locks_removed_total += locks_before - self._lock_count()
        if handled:
            logger.debug("Tick %d: handled %d input(s), player at %s", self.tick_count, handled, self.player.position)

    def step(self, action: Action = Action.NONE) -> Tuple[np.ndarray, Dict[str, Any]]:
        locks_before = self.locks_removed_total
        direction = Action(action).direction()
        if direction is not None:
            self.push_input(direction)
        self.advance()
        info = {
            "player": self.player.position,
            "tick": self.tick_count,
            "locks_removed": self.locks_removed_total - locks_before,
            "locks_removed_total": self.locks_removed_total,
        }
        return self.get_state(), info

    def get_state(self) -> np.ndarray:
        return self.grid.clone_state()
