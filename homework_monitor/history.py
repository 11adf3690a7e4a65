import logging
from typing import NamedTuple

from homework_monitor.models import AnalysisResult

logger = logging.getLogger(__name__)


class HistoryEntry(NamedTuple):
    timestamp: int
    result: AnalysisResult


class ResultHistory:
    """Recent results per sender, kept in memory only."""

    def __init__(self, max_per_sender: int = 20) -> None:
        if max_per_sender < 1:
            raise ValueError(f"max_per_sender must be at least 1, got {max_per_sender}")
        self._max = max_per_sender
        self._store: dict[str, list[HistoryEntry]] = {}

    def append(self, sender: str, timestamp: int, result: AnalysisResult) -> None:
        history = self._store.get(sender, [])
        history.append(HistoryEntry(timestamp, result))
        self._store[sender] = history[-self._max:]

    def get(self, sender: str) -> list[HistoryEntry]:
        return list(self._store.get(sender, []))

    def latest(self, sender: str) -> HistoryEntry | None:
        match self._store.get(sender):
            case None | []:
                return None
            case [*_, last]:
                return last

    def clear(self, sender: str) -> None:
        match self._store.pop(sender, None):
            case None:
                pass
            case dropped:
                logger.info("Cleared %d results for %s", len(dropped), sender)
