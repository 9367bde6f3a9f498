from __future__ import annotations

import gymnasium as gym
import numpy as np

import fall_puzzle_rl.env  # noqa: F401
from fall_puzzle_rl.env.fall_puzzle_env import FallPuzzleEnv
from fall_puzzle_rl.game import DEFAULT_LEVEL, Action, GameConfig

KEY_LEVEL = [
    [2, 2, 2, 2, 2, 2],
    [2, 3, 0, 9, 11, 2],
    [2, 8, 1, 1, 9, 2],
    [2, 2, 2, 2, 2, 2],
]


def test_reset_returns_level_codes() -> None:
    env = FallPuzzleEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (6, 8)
    assert obs.dtype == np.int8
    assert np.array_equal(obs, np.array(DEFAULT_LEVEL, dtype=np.int8))
    assert env.observation_space.contains(obs)
    assert info["player"] == (1, 1)


def test_opening_locks_is_rewarded() -> None:
    env = FallPuzzleEnv(config=GameConfig(level=[row[:] for row in KEY_LEVEL]), lock_reward=0.5, step_penalty=-0.01)
    env.reset()
    obs, reward, terminated, truncated, info = env.step(int(Action.DOWN))
    assert reward == 0.5 * 2 - 0.01
    assert not terminated and not truncated
    assert info["player"] == (1, 2)
    assert info["reward_components"]["locks"] == 1.0

    _, reward, _, _, _ = env.step(int(Action.NONE))
    assert reward == -0.01


def test_episode_truncates_at_max_steps() -> None:
    env = FallPuzzleEnv(config=GameConfig(max_episode_steps=3))
    env.reset()
    results = [env.step(int(Action.NONE)) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]


def test_rgb_render() -> None:
    env = FallPuzzleEnv(render_mode="rgb_array")
    env.reset()
    img = env.render()
    assert img is not None
    assert img.shape == (6 * 12, 8 * 12, 3)
    # Top-left cell is a wall, drawn grey.
    assert tuple(img[0, 0]) == (153, 153, 153)


def test_registered_env_steps() -> None:
    env = gym.make("FallPuzzle-v0")
    obs, _ = env.reset(seed=1)
    obs, reward, terminated, truncated, info = env.step(int(Action.RIGHT))
    assert info["player"] == (2, 1)
    assert reward == 0.0
    env.close()
