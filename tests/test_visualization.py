from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from fall_puzzle_rl.game import CYAN_KEY, YELLOW_KEY, FallPuzzleGame, RawTile  # noqa: E402
from fall_puzzle_rl.rl.random_agent import run_random  # noqa: E402
from fall_puzzle_rl.visualization.palette import color_for_code  # noqa: E402
from fall_puzzle_rl.visualization.renderer import Renderer  # noqa: E402


def test_keys_and_locks_use_key_colors() -> None:
    assert color_for_code(RawTile.KEY1) == YELLOW_KEY.color
    assert color_for_code(RawTile.LOCK1) == YELLOW_KEY.color
    assert color_for_code(RawTile.LOCK2) == CYAN_KEY.color
    assert color_for_code(RawTile.STONE) == color_for_code(RawTile.FALLING_STONE)


def test_renderer_paints_each_cell() -> None:
    game = FallPuzzleGame()
    renderer = Renderer(cell_size=10)
    state = game.get_state()
    assert renderer.window_size(state) == (80, 60)
    surf = renderer._grid_surface(state)
    assert surf.get_size() == (80, 60)
    # Player starts at (1, 1).
    assert tuple(surf.get_at((15, 15)))[:3] == (255, 0, 0)
    pygame.quit()


def test_random_agent_runs(capsys) -> None:
    total = run_random(steps=20, seed=3)
    assert total >= 0.0
    assert "Random agent total reward" in capsys.readouterr().out
