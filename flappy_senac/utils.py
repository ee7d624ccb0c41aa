"""Geometry and color utility functions used across the game."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pygame


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' into an (r, g, b) tuple."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected #RRGGBB color, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def hitbox_hits_obstacle(
    cx: float,
    cy: float,
    r: float,
    obstacle_x: float,
    gap_top: float,
    width: float,
    gap: float,
) -> bool:
    """True if the square hitbox around (cx,cy) overlaps a pillar pair.

    The hitbox overlaps horizontally when it intersects [obstacle_x, obstacle_x + width].
    It is safe only when [cy - r, cy + r] lies fully inside [gap_top, gap_top + gap].
    """
    overlaps_x = cx + r > obstacle_x and cx - r < obstacle_x + width
    if not overlaps_x:
        return False
    return cy - r < gap_top or cy + r > gap_top + gap


def out_of_bounds(cy: float, half_size: float, height: float) -> bool:
    """True if a sprite of the given half size touches the ceiling or the ground."""
    return cy + half_size >= height or cy - half_size <= 0


def gradient_array(length: int, stops: Sequence[tuple[float, tuple[int, int, int]]]) -> np.ndarray:
    """Sample a multi-stop linear gradient into a (length, 3) uint8 array.

    Args:
        length: Number of samples along the gradient axis.
        stops: (offset, rgb) pairs with offsets in [0, 1], in ascending order.
    """
    t = np.linspace(0.0, 1.0, length, dtype=np.float32)
    offsets = np.array([s[0] for s in stops], dtype=np.float32)
    colors = np.array([s[1] for s in stops], dtype=np.float32)
    channels = [np.interp(t, offsets, colors[:, c]) for c in range(3)]
    return np.clip(np.stack(channels, axis=-1), 0, 255).astype(np.uint8)


def vertical_gradient_surface(
    w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]
) -> pygame.Surface:
    """Precompute a top-to-bottom gradient as a surface for fast blitting."""
    column = gradient_array(h, [(0.0, top), (1.0, bottom)])
    # surfarray is indexed [x, y]
    pixels = np.broadcast_to(column[np.newaxis, :, :], (w, h, 3))
    return pygame.surfarray.make_surface(np.ascontiguousarray(pixels))


def horizontal_gradient_surface(
    w: int, h: int, stops: Sequence[tuple[float, tuple[int, int, int]]]
) -> pygame.Surface:
    """Precompute a left-to-right gradient as a surface for fast blitting."""
    row = gradient_array(w, stops)
    pixels = np.broadcast_to(row[:, np.newaxis, :], (w, h, 3))
    return pygame.surfarray.make_surface(np.ascontiguousarray(pixels))
