"""Game entities: the player-controlled book, the pillars, and particle effects.

Entities only integrate their own motion. Drawing lives in ``render.py`` so the
simulation can run without a display.
"""

from __future__ import annotations

import random

from .config import (
    BIRD_HITBOX_RADIUS,
    BIRD_SIZE,
    BIRD_X,
    GAME_HEIGHT,
    GRAVITY,
    JUMP_STRENGTH,
    MAX_ROTATION,
    PARTICLE_DECAY,
    PARTICLE_SPREAD,
    PIPE_GAP,
    PIPE_SPEED,
    PIPE_WIDTH,
    ROTATION_FACTOR,
)
from .utils import clamp, hitbox_hits_obstacle, out_of_bounds


class Particle:
    """A short-lived dot that drifts in a straight line and fades out."""

    def __init__(
        self, x: float, y: float, vx: float, vy: float, color: tuple[int, int, int], life: float = 1.0
    ) -> None:
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.color = color
        self.life = life

    @classmethod
    def spawn(cls, x: float, y: float, color: tuple[int, int, int], rng: random.Random) -> Particle:
        half = PARTICLE_SPREAD / 2
        return cls(x, y, rng.uniform(-half, half), rng.uniform(-half, half), color)

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.life = max(0.0, self.life - PARTICLE_DECAY)


class Player:
    """The flying book. Horizontal position is fixed at ``BIRD_X``."""

    x = BIRD_X

    def __init__(self, y: float = GAME_HEIGHT / 2) -> None:
        self.y = float(y)
        self.velocity = 0.0
        self.rotation = 0.0

    def reset(self, y: float = GAME_HEIGHT / 2) -> None:
        self.y = float(y)
        self.velocity = 0.0
        self.rotation = 0.0

    def jump(self) -> None:
        self.velocity = JUMP_STRENGTH

    def update(self) -> None:
        self.velocity += GRAVITY
        self.y += self.velocity
        # Nose follows velocity, clamped to +/-45 degrees
        self.rotation = clamp(self.velocity * ROTATION_FACTOR, -MAX_ROTATION, MAX_ROTATION)

    def out_of_bounds(self) -> bool:
        return out_of_bounds(self.y, BIRD_SIZE / 2, GAME_HEIGHT)


class Obstacle:
    """A pillar pair with a fixed-size opening starting at ``top_height``."""

    def __init__(self, x: float, top_height: float) -> None:
        self.x = float(x)
        self.top_height = top_height
        self.passed = False

    @property
    def gap_bottom(self) -> float:
        return self.top_height + PIPE_GAP

    @property
    def right(self) -> float:
        return self.x + PIPE_WIDTH

    def update(self) -> None:
        self.x -= PIPE_SPEED

    def offscreen(self) -> bool:
        return self.right < 0

    def collides(self, player: Player) -> bool:
        return hitbox_hits_obstacle(
            player.x, player.y, BIRD_HITBOX_RADIUS, self.x, self.top_height, PIPE_WIDTH, PIPE_GAP
        )

    def cleared_by(self, player: Player) -> bool:
        """True once the pillar's right edge has moved past the player."""
        return self.right < player.x
