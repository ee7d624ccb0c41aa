import os
import random

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from flappy_senac.config import GAME_HEIGHT, GAME_WIDTH, JUMP_STRENGTH, RESTART_BUTTON_RECT
from flappy_senac.game import Game
from flappy_senac.simulation import Phase
from flappy_senac.storage import HighScoreStore


def make_game(tmp_path, best: int = 0) -> Game:
    store = HighScoreStore(tmp_path / "scores.json")
    if best:
        store.save(best)
    return Game(store=store, rng=random.Random(11))


def test_game_init(tmp_path) -> None:
    """Game opens a 400x600 surface and starts on the start screen."""
    g = make_game(tmp_path, best=7)
    assert g.screen.get_size() == (GAME_WIDTH, GAME_HEIGHT)
    assert g.lifecycle.phase is Phase.START
    assert g.lifecycle.best_score == 7
    assert g.running is False
    pygame.quit()


def test_space_starts_session(tmp_path) -> None:
    g = make_game(tmp_path)
    g.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert g.lifecycle.phase is Phase.PLAYING
    assert g.lifecycle.simulation.player.velocity == JUMP_STRENGTH
    pygame.quit()


def test_restart_button_after_game_over(tmp_path) -> None:
    g = make_game(tmp_path)
    g.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    g.lifecycle.simulation.end_game()
    button = pygame.Rect(RESTART_BUTTON_RECT)
    g.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=button.center))
    assert g.lifecycle.phase is Phase.START
    assert g.lifecycle.score == 0
    pygame.quit()


def test_run_is_bounded_and_tears_down(tmp_path) -> None:
    g = make_game(tmp_path)
    g.run(max_frames=5)
    assert g.frames == 5
    assert g.running is False
    assert g.lifecycle.simulation.frame_count == 5
    assert not pygame.get_init()


def test_queued_jump_is_handled_before_the_step(tmp_path) -> None:
    g = make_game(tmp_path)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    g.run(max_frames=3)
    assert g.lifecycle.phase is Phase.PLAYING


def test_quit_event_stops_loop(tmp_path) -> None:
    g = make_game(tmp_path)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    g.run(max_frames=100)
    assert g.frames == 0
    assert g.running is False


def test_stop_cancels_loop(tmp_path) -> None:
    g = make_game(tmp_path)
    original_frame = g.frame

    def frame_then_stop() -> None:
        original_frame()
        g.stop()

    g.frame = frame_then_stop
    g.run()
    assert g.frames == 1
