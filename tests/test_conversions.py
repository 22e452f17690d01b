# File: tests/test_conversions.py

"""Color model, cube reduction and readability adjustment."""

import itertools

import pytest

from pridecat.core import config as c
from pridecat.core.conversions import adjust_for_readability, rgb_to_cube_index, rgb_to_hex
from pridecat.core.models import Color

SAMPLE = list(range(0, 256, 15)) + [42, 43, 85, 86, 254, 255]


def test_color_from_int_unpacks_channels():
    assert Color.from_int(0xE40303) == Color(228, 3, 3)
    assert Color.from_int(0x000000) == Color(0, 0, 0)
    assert Color.from_int(0xFFFFFF) == Color(255, 255, 255)


@pytest.mark.parametrize("value", [-1, 0x1000000])
def test_color_from_int_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        Color.from_int(value)


def test_rgb_to_hex():
    assert rgb_to_hex(228, 3, 3) == "E40303"
    assert rgb_to_hex(0, 77, 255) == "004DFF"


def test_cube_index_corners():
    assert rgb_to_cube_index(Color(0, 0, 0)) == 16
    assert rgb_to_cube_index(Color(255, 255, 255)) == 231
    assert rgb_to_cube_index(Color(255, 0, 0)) == 196
    assert rgb_to_cube_index(Color(0, 255, 0)) == 46
    assert rgb_to_cube_index(Color(0, 0, 255)) == 21


def test_cube_index_uses_six_way_partition_of_256():
    # 42 * 6 // 256 == 0 and 43 * 6 // 256 == 1 (channel // 51 would give 0 for both)
    assert rgb_to_cube_index(Color(42, 0, 0)) == 16
    assert rgb_to_cube_index(Color(43, 0, 0)) == 16 + 36
    assert rgb_to_cube_index(Color(0, 43, 0)) == 16 + 6
    assert rgb_to_cube_index(Color(0, 0, 43)) == 16 + 1


def test_cube_index_never_leaves_the_cube():
    for r, g, b in itertools.product(SAMPLE, repeat=3):
        index = rgb_to_cube_index(Color(r, g, b))
        assert c.CUBE_OFFSET <= index <= c.CUBE_MAX_INDEX


def test_grays_map_onto_cube_diagonal():
    assert rgb_to_cube_index(Color(128, 128, 128)) == 16 + 36 * 3 + 6 * 3 + 3


def test_adjust_none_is_identity():
    color = Color(12, 34, 56)
    assert adjust_for_readability(color, c.ADJUST_NONE) is color


def test_adjust_darken_and_lighten_values():
    color = Color(255, 128, 1)
    assert adjust_for_readability(color, c.ADJUST_DARKEN) == Color(191, 96, 0)
    assert adjust_for_readability(color, c.ADJUST_LIGHTEN) == Color(255, 160, 64)


def test_adjust_is_monotonic_per_channel():
    for value in range(256):
        color = Color(value, value, value)
        darker = adjust_for_readability(color, c.ADJUST_DARKEN)
        lighter = adjust_for_readability(color, c.ADJUST_LIGHTEN)
        assert all(d <= o for d, o in zip(darker, color))
        assert all(o <= l <= 255 for l, o in zip(lighter, color))


def test_adjust_rejects_unknown_mode():
    with pytest.raises(ValueError):
        adjust_for_readability(Color(0, 0, 0), "sepia")
