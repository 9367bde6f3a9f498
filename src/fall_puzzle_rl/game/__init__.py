"""Game module for Fall Puzzle RL.

Exports the simulation core:
- GameGrid: Tile grid with gravity, push and lock removal
- Tile variants and RawTile level codes
- FallingState: Falling / Resting support derived from the tile below
- KeyConfiguration: Key classes and the locks they open
- Player, Direction, CommandQueue: Input and player bookkeeping
- FallPuzzleGame: Tick driver and simulation context
"""

from .commands import CommandQueue, Direction
from .core import Action, FallPuzzleGame, GameConfig
from .exceptions import (
    FallPuzzleError,
    GridBoundsError,
    InvalidCommandError,
    LevelError,
    LevelShapeError,
    PlayerStartError,
    UnknownTileCodeError,
)
from .falling import FALLING, RESTING, FallingState
from .grid import GameGrid
from .keys import CYAN_KEY, YELLOW_KEY, KeyConfiguration, RemoveLockOfClass
from .levels import DEFAULT_LEVEL
from .player import Player
from .tiles import Air, Box, Flux, Key, Lock, PlayerTile, RawTile, Stone, Tile, Unbreakable, transform_tile

__all__ = [
    "Action",
    "Air",
    "Box",
    "CommandQueue",
    "CYAN_KEY",
    "DEFAULT_LEVEL",
    "Direction",
    "FALLING",
    "FallingState",
    "FallPuzzleError",
    "FallPuzzleGame",
    "Flux",
    "GameConfig",
    "GameGrid",
    "GridBoundsError",
    "InvalidCommandError",
    "Key",
    "KeyConfiguration",
    "LevelError",
    "LevelShapeError",
    "Lock",
    "Player",
    "PlayerStartError",
    "PlayerTile",
    "RawTile",
    "RemoveLockOfClass",
    "RESTING",
    "Stone",
    "Tile",
    "Unbreakable",
    "UnknownTileCodeError",
    "YELLOW_KEY",
    "transform_tile",
]
