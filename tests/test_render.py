import os
import random

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from flappy_senac.config import GAME_HEIGHT, GAME_WIDTH, RESTART_BUTTON_RECT
from flappy_senac.entities import Obstacle
from flappy_senac.render import Renderer
from flappy_senac.simulation import Phase, Simulation


def setup_module(module: object) -> None:
    pygame.init()


def teardown_module(module: object) -> None:
    pygame.quit()


@pytest.fixture
def renderer() -> Renderer:
    return Renderer((GAME_WIDTH, GAME_HEIGHT))


def rgb(surf: pygame.Surface, pos: tuple[int, int]) -> tuple[int, int, int]:
    return tuple(surf.get_at(pos))[:3]


def snapshot(sim: Simulation) -> tuple:
    return (
        sim.phase,
        sim.score,
        sim.frame_count,
        (sim.player.y, sim.player.velocity, sim.player.rotation),
        [(o.x, o.top_height, o.passed) for o in sim.obstacles],
        [(p.x, p.y, p.vx, p.vy, p.life) for p in sim.particles],
    )


def test_missing_surface_skips_frame(renderer: Renderer) -> None:
    sim = Simulation(rng=random.Random(0))
    renderer.draw(None, sim, 0)


def test_draw_does_not_mutate_simulation(renderer: Renderer) -> None:
    sim = Simulation(rng=random.Random(1))
    sim.jump()
    for _ in range(5):
        sim.step()
    sim.jump()
    sim.obstacles.append(Obstacle(200, 150))
    before = snapshot(sim)
    surf = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
    for phase in Phase:
        sim.phase = phase
        renderer.draw(surf, sim, 9)
    sim.phase = before[0]
    assert snapshot(sim) == before


def test_layers_land_where_expected(renderer: Renderer) -> None:
    sim = Simulation(rng=random.Random(2))
    sim.phase = Phase.PLAYING
    sim.obstacles = [Obstacle(250, 100)]
    surf = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
    renderer.draw(surf, sim, 0)

    # sky near the top is the pale cyan end of the gradient
    r, g, b = rgb(surf, (10, 130))
    assert 224 <= r <= 232 and g >= 247 and b >= 250
    # pillar body is brand blue, cap is brand orange
    r, g, b = rgb(surf, (250 + 30, 50))
    assert r == 0 and 69 <= g <= 91 and 135 <= b <= 179
    assert rgb(surf, (250 + 30, 95)) == (246, 141, 46)
    assert rgb(surf, (250 + 30, 100 + 160 + 5)) == (246, 141, 46)
    # gap stays clear
    assert rgb(surf, (250 + 30, 180))[0] > 200
    # ground strip
    assert rgb(surf, (5, GAME_HEIGHT - 5)) == (51, 51, 51)
    # the book's pages sit just left of the sprite centre
    assert rgb(surf, (int(sim.player.x) - 8, int(sim.player.y) + 4)) == (255, 255, 255)


def test_particles_fade_with_life(renderer: Renderer) -> None:
    sim = Simulation(rng=random.Random(3))
    sim.phase = Phase.PLAYING
    sim.emit_particles(300, 450, (246, 141, 46))
    for p in sim.particles:
        p.vx = p.vy = 0.0
    surf = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
    renderer.draw(surf, sim, 0)
    bright = rgb(surf, (300, 450))
    for p in sim.particles:
        p.life = 0.1
    renderer.draw(surf, sim, 0)
    faint = rgb(surf, (300, 450))
    assert bright[2] < faint[2]


def test_game_over_card_shows_restart_button(renderer: Renderer) -> None:
    sim = Simulation(rng=random.Random(4))
    sim.phase = Phase.GAME_OVER
    surf = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
    renderer.draw(surf, sim, 3)
    x, y, w, h = RESTART_BUTTON_RECT
    assert rgb(surf, (x + 6, y + 6)) == (0, 69, 135)
