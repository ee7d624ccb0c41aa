"""Rendering composition: paints the simulation back-to-front without mutating it."""

from __future__ import annotations

import math
from typing import Optional

import pygame

from .config import (
    BIRD_SIZE,
    COLOR_EYE,
    COLOR_GROUND,
    COLOR_PAGES,
    COLOR_SENAC_BLUE,
    COLOR_SENAC_BLUE_LIGHT,
    COLOR_SENAC_ORANGE,
    COLOR_SKY_BOTTOM,
    COLOR_SKY_TOP,
    GAME_HEIGHT,
    GAME_WIDTH,
    GRID_RGBA,
    GRID_STEP,
    GROUND_HEIGHT,
    PARTICLE_RADIUS,
    PIPE_CAP_HEIGHT,
    PIPE_CAP_OVERHANG,
    PIPE_GAP,
    PIPE_STRIPE_OFFSET,
    PIPE_STRIPE_WIDTH,
    PIPE_WIDTH,
    STRIPE_RGBA,
)
from .entities import Obstacle, Particle, Player
from .hud import Hud
from .simulation import Simulation
from .utils import hex_to_rgb, horizontal_gradient_surface, vertical_gradient_surface


class Renderer:
    """Owns precomputed surfaces and draws one frame from simulation state."""

    def __init__(self, size: tuple[int, int] = (GAME_WIDTH, GAME_HEIGHT)) -> None:
        self.width, self.height = size
        self.blue = hex_to_rgb(COLOR_SENAC_BLUE)
        self.orange = hex_to_rgb(COLOR_SENAC_ORANGE)
        self.ground = hex_to_rgb(COLOR_GROUND)

        # Precompute static layers
        self.sky = vertical_gradient_surface(
            self.width, self.height, hex_to_rgb(COLOR_SKY_TOP), hex_to_rgb(COLOR_SKY_BOTTOM)
        )
        self.grid = self._generate_grid_surface()
        self.pillar = horizontal_gradient_surface(
            PIPE_WIDTH,
            self.height,
            [(0.0, self.blue), (0.8, hex_to_rgb(COLOR_SENAC_BLUE_LIGHT)), (1.0, self.blue)],
        )
        self.stripe = pygame.Surface((PIPE_STRIPE_WIDTH, self.height), pygame.SRCALPHA)
        self.stripe.fill(STRIPE_RGBA)
        self.sprite = self._generate_player_sprite()
        self.hud = Hud(size)

    def _generate_grid_surface(self) -> pygame.Surface:
        # Graph paper lines for the education theme
        surf = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for x in range(0, self.width, GRID_STEP):
            pygame.draw.line(surf, GRID_RGBA, (x, 0), (x, self.height))
        for y in range(0, self.height, GRID_STEP):
            pygame.draw.line(surf, GRID_RGBA, (0, y), (self.width, y))
        return surf

    def _generate_player_sprite(self) -> pygame.Surface:
        """Draw the unrotated book once; it is rotated per frame."""
        size = BIRD_SIZE * 2
        s = pygame.Surface((size, size), pygame.SRCALPHA)
        c = size / 2
        book_w = BIRD_SIZE
        book_h = BIRD_SIZE * 0.7

        # Cover
        cover = pygame.Rect(0, 0, book_w, round(book_h))
        cover.center = (int(c), int(c))
        pygame.draw.rect(s, self.blue, cover, border_radius=4)
        # Pages
        pygame.draw.rect(s, hex_to_rgb(COLOR_PAGES), cover.inflate(-8, -8), border_radius=2)
        # Brand corner
        pygame.draw.polygon(
            s,
            self.orange,
            [
                (c + book_w / 2 - 4, c + book_h / 2 - 4),
                (c, c + book_h / 2 - 4),
                (c + book_w / 2 - 4, c),
            ],
        )
        # Eye and glasses
        eye = (int(c + 6), int(c - 2))
        pygame.draw.circle(s, hex_to_rgb(COLOR_EYE), eye, 2)
        pygame.draw.circle(s, self.blue, eye, 4, 2)
        pygame.draw.line(s, self.blue, (int(c + 2), int(c - 2)), (int(c - 4), int(c - 2)), 2)
        return s

    def draw_background(self, surf: pygame.Surface) -> None:
        surf.blit(self.sky, (0, 0))
        surf.blit(self.grid, (0, 0))

    def draw_obstacle(self, surf: pygame.Surface, obs: Obstacle) -> None:
        x = int(obs.x)
        top_h = max(0, int(obs.top_height))
        bottom_y = int(obs.top_height + PIPE_GAP)
        bottom_h = max(0, self.height - bottom_y)

        # Pillar bodies
        surf.blit(self.pillar, (x, 0), pygame.Rect(0, 0, PIPE_WIDTH, top_h))
        surf.blit(self.pillar, (x, bottom_y), pygame.Rect(0, 0, PIPE_WIDTH, bottom_h))
        # Caps
        cap_w = PIPE_WIDTH + 2 * PIPE_CAP_OVERHANG
        pygame.draw.rect(surf, self.orange, (x - PIPE_CAP_OVERHANG, top_h - PIPE_CAP_HEIGHT, cap_w, PIPE_CAP_HEIGHT))
        pygame.draw.rect(surf, self.orange, (x - PIPE_CAP_OVERHANG, bottom_y, cap_w, PIPE_CAP_HEIGHT))
        # Accent stripe
        sx = x + PIPE_STRIPE_OFFSET
        surf.blit(self.stripe, (sx, 0), pygame.Rect(0, 0, PIPE_STRIPE_WIDTH, top_h))
        surf.blit(self.stripe, (sx, bottom_y), pygame.Rect(0, 0, PIPE_STRIPE_WIDTH, bottom_h))

    def draw_particle(self, surf: pygame.Surface, p: Particle) -> None:
        d = PARTICLE_RADIUS * 2
        s = pygame.Surface((d, d), pygame.SRCALPHA)
        alpha = int(255 * max(0.0, min(1.0, p.life)))
        pygame.draw.circle(s, (*p.color, alpha), (PARTICLE_RADIUS, PARTICLE_RADIUS), PARTICLE_RADIUS)
        surf.blit(s, (int(p.x) - PARTICLE_RADIUS, int(p.y) - PARTICLE_RADIUS))

    def draw_player(self, surf: pygame.Surface, player: Player) -> None:
        # pygame rotates counter-clockwise; screen-space rotation is clockwise
        rotated = pygame.transform.rotate(self.sprite, -math.degrees(player.rotation))
        rect = rotated.get_rect(center=(int(player.x), int(player.y)))
        surf.blit(rotated, rect.topleft)

    def draw_ground(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.ground, (0, self.height - GROUND_HEIGHT, self.width, GROUND_HEIGHT))

    def draw(self, surf: Optional[pygame.Surface], sim: Simulation, best_score: int = 0) -> None:
        """Paint one frame. A missing surface skips the frame."""
        if surf is None:
            return
        self.draw_background(surf)
        for obs in sim.obstacles:
            self.draw_obstacle(surf, obs)
        for p in sim.particles:
            self.draw_particle(surf, p)
        self.draw_player(surf, sim.player)
        self.draw_ground(surf)
        self.hud.draw(surf, sim.phase, sim.score, best_score)
