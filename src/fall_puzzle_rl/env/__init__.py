"""Gymnasium environments for Fall Puzzle RL."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register the default level environment
register(
    id="FallPuzzle-v0",
    entry_point="fall_puzzle_rl.env.fall_puzzle_env:FallPuzzleEnv",
)

__all__ = ["FallPuzzle-v0"]
