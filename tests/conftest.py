from __future__ import annotations

import copy
from typing import Callable, List

import pytest

from fall_puzzle_rl.game import FallPuzzleGame, GameConfig


Level = List[List[int]]


@pytest.fixture()
def make_game() -> Callable[[Level], FallPuzzleGame]:
    def _make(level: Level) -> FallPuzzleGame:
        return FallPuzzleGame(GameConfig(level=copy.deepcopy(level)))

    return _make
