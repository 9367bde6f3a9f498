from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from fall_puzzle_rl.game import Action, FallPuzzleGame, GameConfig, RawTile
from fall_puzzle_rl.visualization.palette import color_for_code


class FallPuzzleEnv(gym.Env):
    """One env step queues a single move and advances the game one tick.

    The game has no goal state, so episodes only end by truncation.
    Opening locks is rewarded so random exploration has some signal.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 lock_reward: float = 1.0,
                 step_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = FallPuzzleGame(config)
        self.render_mode = render_mode
        self.lock_reward = float(lock_reward)
        self.step_penalty = float(step_penalty)

        h, w = self.game.grid.height, self.game.grid.width
        self.observation_space = spaces.Box(
            low=0, high=int(max(RawTile)), shape=(h, w), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

        self._last_obs: Optional[np.ndarray] = None
        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "player": self.game.player.position,
            "tick": self.game.tick_count,
            "locks_removed_total": self.game.locks_removed_total,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset()
        self._steps = 0
        obs = self.game.get_state()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        obs, step_info = self.game.step(Action(int(action)))
        self._steps += 1

        reward_components: Dict[str, float] = {
            "locks": self.lock_reward * float(step_info["locks_removed"]),
            "step": self.step_penalty,
        }
        reward = float(sum(reward_components.values()))

        terminated = False
        truncated = self._steps >= self.game.config.max_episode_steps

        info = self._get_info()
        info["reward_components"] = reward_components
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self._last_obs if self._last_obs is not None else self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_code(grid[y, x])
            return img
        return None

    def close(self) -> None:
        pass
