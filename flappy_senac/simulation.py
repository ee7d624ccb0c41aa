"""Per-frame simulation: physics, pillar spawning, collisions, scoring and particles."""

from __future__ import annotations

import enum
import logging
import math
import random
from typing import Callable, Optional

from .config import (
    FIRST_PIPE_OFFSET,
    FRAME_MS,
    GAME_HEIGHT,
    GAME_WIDTH,
    GROUND_MARGIN,
    IDLE_AMPLITUDE,
    IDLE_PERIOD_MS,
    JUMP_PARTICLE_COLOR,
    PARTICLE_BURST,
    PIPE_GAP,
    PIPE_MIN_HEIGHT,
    PIPE_SPACING,
    SCORE_PARTICLE_COLOR,
)
from .entities import Obstacle, Particle, Player

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    START = "START"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


class Simulation:
    """Owns all mutable per-session state and advances it one tick at a time.

    Randomness comes from an injectable ``random.Random`` so spawning can be
    replayed in tests. ``on_game_over`` is called once per session with the
    final score.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.on_game_over = on_game_over
        self.phase = Phase.START
        self.player = Player()
        self.obstacles: list[Obstacle] = []
        self.particles: list[Particle] = []
        self.frame_count = 0
        self.score = 0
        self.reset()

    def reset(self) -> None:
        """Return to the initial session state: one far-off pillar, no particles, zero score."""
        self.player.reset(GAME_HEIGHT / 2)
        self.obstacles = [Obstacle(GAME_WIDTH + FIRST_PIPE_OFFSET, self.random_gap_top())]
        self.particles = []
        self.score = 0
        self.frame_count = 0

    def random_gap_top(self) -> int:
        max_height = GAME_HEIGHT - PIPE_GAP - PIPE_MIN_HEIGHT - GROUND_MARGIN
        return self.rng.randint(PIPE_MIN_HEIGHT, max_height)

    def emit_particles(self, x: float, y: float, color: tuple[int, int, int]) -> None:
        for _ in range(PARTICLE_BURST):
            self.particles.append(Particle.spawn(x, y, color, self.rng))

    def jump(self) -> None:
        if self.phase is Phase.PLAYING:
            self.player.jump()
            self.emit_particles(self.player.x - 10, self.player.y + 10, JUMP_PARTICLE_COLOR)
        elif self.phase is Phase.START:
            self.phase = Phase.PLAYING
            self.reset()
            self.player.jump()
            logger.info("Session started")
        # GAME_OVER: restart is a separate, explicit action

    def end_game(self) -> None:
        if self.phase is Phase.GAME_OVER:
            return
        self.phase = Phase.GAME_OVER
        logger.info("Game over with score %d", self.score)
        if self.on_game_over is not None:
            self.on_game_over(self.score)

    def step(self) -> None:
        """Advance the simulation by exactly one tick."""
        self.frame_count += 1
        if self.phase is Phase.PLAYING:
            self._step_playing()
        elif self.phase is Phase.START:
            # Idle bobbing; purely visual
            t = self.frame_count * FRAME_MS
            self.player.y = GAME_HEIGHT / 2 + math.sin(t / IDLE_PERIOD_MS) * IDLE_AMPLITUDE
        self._update_particles()

    def _spawn_obstacles(self) -> None:
        if not self.obstacles:
            self.obstacles.append(Obstacle(GAME_WIDTH, self.random_gap_top()))
            return
        last = self.obstacles[-1]
        if GAME_WIDTH - last.x >= PIPE_SPACING:
            # Anchor to the previous pillar so spacing stays exact
            self.obstacles.append(Obstacle(last.x + PIPE_SPACING, self.random_gap_top()))

    def _step_playing(self) -> None:
        player = self.player
        player.update()

        self._spawn_obstacles()

        for obs in self.obstacles:
            obs.update()
        self.obstacles = [o for o in self.obstacles if not o.offscreen()]

        for obs in self.obstacles:
            if obs.collides(player):
                self.end_game()
                return
            if not obs.passed and obs.cleared_by(player):
                obs.passed = True
                self.score += 1
                self.emit_particles(player.x, player.y, SCORE_PARTICLE_COLOR)

        if player.out_of_bounds():
            self.end_game()

    def _update_particles(self) -> None:
        for p in self.particles:
            p.update()
        self.particles = [p for p in self.particles if p.alive]
