"""Game loop and event dispatch for Flappy Senac."""

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .config import FPS, GAME_HEIGHT, GAME_WIDTH, LOG_LEVEL
from .haptics import Haptics
from .input import Action, InputAdapter
from .lifecycle import Lifecycle
from .logging_config import setup_logging
from .render import Renderer
from .storage import HighScoreStore

logger = logging.getLogger(__name__)


class Game:
    """Top-level game controller: owns the window, the loop, and the collaborators."""

    def __init__(
        self,
        store: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT))
        pygame.display.set_caption("Flappy Senac")
        self.clock = pygame.time.Clock()
        self.lifecycle = Lifecycle(store=store, haptics=Haptics(), rng=rng)
        self.renderer = Renderer((GAME_WIDTH, GAME_HEIGHT))
        self.input = InputAdapter((GAME_WIDTH, GAME_HEIGHT))
        self.running = False
        self.frames = 0

    def stop(self) -> None:
        """Cancel the loop; the current frame finishes and no further frame is scheduled."""
        self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        action = self.input.translate(event, self.lifecycle.phase)
        if action is Action.JUMP:
            self.lifecycle.jump()
        elif action is Action.RESTART:
            self.lifecycle.restart()
        elif action is Action.QUIT:
            self.stop()

    def frame(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)
            if not self.running:
                return
        self.lifecycle.tick()
        self.renderer.draw(pygame.display.get_surface(), self.lifecycle.simulation, self.lifecycle.best_score)
        pygame.display.flip()
        self.frames += 1

    def run(self, max_frames: Optional[int] = None) -> None:
        self.running = True
        logger.info("Starting game loop at %d FPS", FPS)
        try:
            while self.running:
                self.clock.tick(FPS)
                self.frame()
                if max_frames is not None and self.frames >= max_frames:
                    self.stop()
        finally:
            pygame.quit()


def main() -> None:
    setup_logging(LOG_LEVEL)
    Game().run()
