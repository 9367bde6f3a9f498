from __future__ import annotations

import numpy as np
import pytest

from fall_puzzle_rl.game import (
    CYAN_KEY,
    FALLING,
    RESTING,
    YELLOW_KEY,
    Air,
    Box,
    Flux,
    Key,
    Lock,
    PlayerTile,
    RawTile,
    Stone,
    Unbreakable,
    UnknownTileCodeError,
    transform_tile,
)


def test_only_air_is_air() -> None:
    assert Air().is_air()
    for tile in (Flux(), Unbreakable(), PlayerTile(), Stone(), Box(), Key(YELLOW_KEY), Lock(YELLOW_KEY)):
        assert not tile.is_air()


def test_lock_class_matching() -> None:
    yellow = Lock(YELLOW_KEY)
    cyan = Lock(CYAN_KEY)
    assert yellow.is_lock_of_class(1)
    assert not yellow.is_lock_of_class(2)
    assert cyan.is_lock_of_class(2)
    assert not cyan.is_lock_of_class(1)
    # Keys are never locks, even of their own class.
    assert not Key(YELLOW_KEY).is_lock_of_class(1)
    assert not Air().is_lock_of_class(1)


def test_block_on_top_state_per_variant() -> None:
    assert Air().block_on_top_state() is FALLING
    assert Stone(FALLING).block_on_top_state() is FALLING
    assert Box(FALLING).block_on_top_state() is FALLING
    for tile in (Flux(), Unbreakable(), PlayerTile(), Stone(RESTING), Box(RESTING), Key(CYAN_KEY), Lock(CYAN_KEY)):
        assert tile.block_on_top_state() is RESTING


def test_transform_tile_covers_every_code() -> None:
    for code in RawTile:
        assert transform_tile(int(code)).raw_code() == code


def test_transform_tile_shares_key_configurations() -> None:
    key = transform_tile(RawTile.KEY1)
    lock = transform_tile(RawTile.LOCK1)
    assert isinstance(key, Key) and isinstance(lock, Lock)
    assert key.key_conf is lock.key_conf is YELLOW_KEY
    assert transform_tile(RawTile.LOCK2).key_conf is CYAN_KEY


def test_transform_tile_accepts_numpy_integers() -> None:
    assert isinstance(transform_tile(np.int8(4)), Stone)


@pytest.mark.parametrize("code", [12, -1, 99, "2", None, 2.0, True])
def test_transform_tile_rejects_unknown_codes(code: object) -> None:
    with pytest.raises(UnknownTileCodeError):
        transform_tile(code)
