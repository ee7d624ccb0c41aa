"""Best-effort haptic feedback through the first attached game controller."""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from .config import HAPTIC_PULSE_MS

logger = logging.getLogger(__name__)


class Haptics:
    """Fire-and-forget rumble pulses. Silently does nothing without support."""

    def __init__(self) -> None:
        self._joystick: Optional[pygame.joystick.JoystickType] = None

    def _controller(self) -> Optional[pygame.joystick.JoystickType]:
        if self._joystick is not None:
            return self._joystick
        if not pygame.joystick.get_init():
            pygame.joystick.init()
        if pygame.joystick.get_count() == 0:
            return None
        self._joystick = pygame.joystick.Joystick(0)
        return self._joystick

    def pulse(self, duration_ms: int = HAPTIC_PULSE_MS) -> bool:
        """Start one rumble pulse. Returns True if the device accepted it."""
        try:
            joystick = self._controller()
            if joystick is None:
                return False
            rumble = getattr(joystick, "rumble", None)
            if rumble is None:
                logger.debug("Controller has no rumble support")
                return False
            return bool(rumble(0.5, 1.0, duration_ms))
        except pygame.error as e:
            logger.debug("Haptic pulse unavailable: %s", e)
            return False
