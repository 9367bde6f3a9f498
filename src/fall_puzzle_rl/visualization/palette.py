from __future__ import annotations

from typing import Dict, Tuple

from fall_puzzle_rl.game import CYAN_KEY, YELLOW_KEY, RawTile


Color = Tuple[int, int, int]

BACKGROUND: Color = (255, 255, 255)
PLAYER_COLOR: Color = (255, 0, 0)

TILE_COLORS: Dict[int, Color] = {
    RawTile.AIR: BACKGROUND,
    RawTile.FLUX: (204, 255, 204),
    RawTile.UNBREAKABLE: (153, 153, 153),
    RawTile.PLAYER: PLAYER_COLOR,
    RawTile.STONE: (0, 0, 204),
    RawTile.FALLING_STONE: (0, 0, 204),
    RawTile.BOX: (139, 69, 19),
    RawTile.FALLING_BOX: (139, 69, 19),
    RawTile.KEY1: YELLOW_KEY.color,
    RawTile.LOCK1: YELLOW_KEY.color,
    RawTile.KEY2: CYAN_KEY.color,
    RawTile.LOCK2: CYAN_KEY.color,
}


def color_for_code(v: int) -> Color:
    return TILE_COLORS.get(int(v), (200, 200, 200))
