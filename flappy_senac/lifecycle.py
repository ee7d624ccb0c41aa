"""Coarse game flow (Start / Playing / GameOver) and best-score bookkeeping."""

from __future__ import annotations

import logging
import random
from typing import Optional

from .haptics import Haptics
from .simulation import Phase, Simulation
from .storage import HighScoreStore

logger = logging.getLogger(__name__)


class Lifecycle:
    """Routes player actions into the simulation and reacts to the end of a session."""

    def __init__(
        self,
        store: Optional[HighScoreStore] = None,
        haptics: Optional[Haptics] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store if store is not None else HighScoreStore()
        self.haptics = haptics if haptics is not None else Haptics()
        self.simulation = Simulation(rng=rng, on_game_over=self._on_game_over)
        self.best_score = self.store.load()

    @property
    def phase(self) -> Phase:
        return self.simulation.phase

    @property
    def score(self) -> int:
        return self.simulation.score

    def jump(self) -> None:
        self.simulation.jump()

    def restart(self) -> bool:
        """Go back to the start screen. Only allowed from GAME_OVER."""
        if self.simulation.phase is not Phase.GAME_OVER:
            return False
        self.simulation.reset()
        self.simulation.phase = Phase.START
        return True

    def tick(self) -> None:
        self.simulation.step()

    def _on_game_over(self, score: int) -> None:
        self.haptics.pulse()
        if score > self.best_score:
            logger.info("New best score: %d (was %d)", score, self.best_score)
            self.best_score = score
            self.store.save(score)
