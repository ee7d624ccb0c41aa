"""Translate keyboard, mouse and touch events into game actions."""

from __future__ import annotations

import enum
from typing import Optional

import pygame

from .config import GAME_HEIGHT, GAME_WIDTH, RESTART_BUTTON_RECT
from .simulation import Phase

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)


class Action(enum.Enum):
    JUMP = "jump"
    RESTART = "restart"
    QUIT = "quit"


class InputAdapter:
    def __init__(self, size: tuple[int, int] = (GAME_WIDTH, GAME_HEIGHT)) -> None:
        self.size = size
        self.restart_rect = pygame.Rect(RESTART_BUTTON_RECT)

    def _press_at(self, pos: tuple[float, float], phase: Phase) -> Action:
        # On the game-over card the button restarts; elsewhere a press is a jump
        if phase is Phase.GAME_OVER and self.restart_rect.collidepoint(int(pos[0]), int(pos[1])):
            return Action.RESTART
        return Action.JUMP

    def translate(self, event: pygame.event.Event, phase: Phase) -> Optional[Action]:
        if event.type == pygame.QUIT:
            return Action.QUIT
        if event.type == pygame.KEYDOWN:
            if event.key in JUMP_KEYS:
                return Action.JUMP
            if event.key in RESTART_KEYS:
                return Action.RESTART
            if event.key == pygame.K_ESCAPE:
                return Action.QUIT
            return None
        if event.type == pygame.MOUSEBUTTONDOWN:
            # SDL mirrors touches as mouse presses; FINGERDOWN already covers them
            if getattr(event, "touch", False):
                return None
            if event.button == 1:
                return self._press_at(event.pos, phase)
            return None
        if event.type == pygame.FINGERDOWN:
            # Touch coordinates are normalised to [0, 1]
            w, h = self.size
            return self._press_at((event.x * w, event.y * h), phase)
        return None
