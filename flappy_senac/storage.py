"""Best-score persistence in a small JSON key-value file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .config import HIGH_SCORE_KEY, SCORES_FILE

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Reads and writes one base-10 integer under a fixed key.

    Every failure is logged and swallowed: a broken or read-only store must
    never interrupt play.
    """

    def __init__(self, path: Path | str = SCORES_FILE, key: str = HIGH_SCORE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> dict:
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def load(self) -> int:
        try:
            raw = self._read_all().get(self.key)
            if raw is None:
                return 0
            value = int(str(raw), 10)
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        try:
            data = self._read_all() if self.path.exists() else {}
        except (OSError, ValueError):
            data = {}
        data[self.key] = str(int(value))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(data), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            logger.warning("Could not save best score to %s: %s", self.path, e)
            return
        logger.debug("Saved best score %d to %s", value, self.path)
