"""
High-score persistence.

The store keeps a single named scalar. Persistence is best-effort:
an unavailable or corrupt store reads as 0 and failed writes are
dropped, so a read-only disk never interrupts a game.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from blockbreaker.logging import get_data_dir, get_logger
from models import HighScoreRecord

log = get_logger('score_store')

HIGH_SCORE_FILENAME = 'high_score.json'


class ScoreStore(ABC):
    """Abstract high-score store."""

    @abstractmethod
    def load(self) -> int:
        """Return the stored high score, or 0 when nothing usable is stored."""
        pass

    @abstractmethod
    def save(self, value: int) -> None:
        """Store a new high score. Never raises."""
        pass


class MemoryScoreStore(ScoreStore):
    """Keeps the high score in memory only (tests, --no-save)."""

    def __init__(self, initial: int = 0):
        self._value = max(int(initial), 0)
        self.save_count = 0

    def load(self) -> int:
        return self._value

    def save(self, value: int) -> None:
        self._value = value
        self.save_count += 1


class FileScoreStore(ScoreStore):
    """Persists the high score as a small JSON document.

    File layout::

        {"high_score": 1234}
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """Initialize store.

        Args:
            path: JSON file to use (default: <data dir>/high_score.json)
        """
        if path is None:
            path = Path(get_data_dir()) / HIGH_SCORE_FILENAME
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        """Location of the high-score file."""
        return self._path

    def load(self) -> int:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return 0
        except OSError as e:
            log.warning("High score unavailable (%s), using 0", e)
            return 0

        try:
            return HighScoreRecord.model_validate_json(raw).high_score
        except (ValidationError, UnicodeDecodeError):
            log.warning("Ignoring corrupt high score file %s", self._path)
            return 0

    def save(self, value: int) -> None:
        try:
            record = HighScoreRecord(high_score=value)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(record.model_dump_json(), encoding='utf-8')
        except (OSError, ValidationError) as e:
            log.debug("High score not saved: %s", e)
