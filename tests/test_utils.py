import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from flappy_senac.utils import (
    clamp,
    gradient_array,
    hex_to_rgb,
    hitbox_hits_obstacle,
    out_of_bounds,
    vertical_gradient_surface,
)


def test_clamp_basic() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_hex_to_rgb() -> None:
    assert hex_to_rgb("#004587") == (0, 69, 135)
    assert hex_to_rgb("F68D2E") == (246, 141, 46)
    with pytest.raises(ValueError):
        hex_to_rgb("#fff")


# pillar spans x in [100, 160], gap spans y in [200, 360], hitbox radius 13
@pytest.mark.parametrize(
    "cx, cy, expected",
    [
        (130, 280, False),  # centered in the gap
        (130, 213, False),  # top edge touches gap top exactly
        (130, 347, False),  # bottom edge touches gap bottom exactly
        (130, 212.9, True),  # pokes above the gap
        (130, 347.1, True),  # pokes below the gap
        (80, 100, False),  # left of the pillar
        (87, 100, False),  # right edge touches pillar left exactly
        (87.1, 100, True),
        (173, 100, False),  # left edge touches pillar right exactly
        (172.9, 500, True),
    ],
)
def test_hitbox_hits_obstacle(cx: float, cy: float, expected: bool) -> None:
    assert hitbox_hits_obstacle(cx, cy, 13, 100, 200, 60, 160) is expected


def test_out_of_bounds() -> None:
    assert out_of_bounds(300, 17, 600) is False
    assert out_of_bounds(583, 17, 600) is True
    assert out_of_bounds(17, 17, 600) is True
    assert out_of_bounds(18, 17, 600) is False


def test_gradient_array_stops() -> None:
    arr = gradient_array(11, [(0.0, (0, 0, 0)), (1.0, (200, 100, 50))])
    assert arr.shape == (11, 3)
    assert tuple(arr[0]) == (0, 0, 0)
    assert tuple(arr[-1]) == (200, 100, 50)
    assert all(abs(int(a) - b) <= 1 for a, b in zip(arr[5], (100, 50, 25)))


def test_vertical_gradient_surface_size_and_ends() -> None:
    surf = vertical_gradient_surface(4, 10, (10, 20, 30), (110, 120, 130))
    assert surf.get_size() == (4, 10)
    assert tuple(surf.get_at((2, 0)))[:3] == (10, 20, 30)
    assert tuple(surf.get_at((2, 9)))[:3] == (110, 120, 130)
