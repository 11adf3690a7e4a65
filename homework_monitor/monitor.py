"""FocusMonitor — turns frames and commands into reply text, transport-agnostic."""
import logging
from datetime import datetime

from homework_monitor.analyzer import FrameAnalyzer
from homework_monitor.constants import (
    HISTORY_DISPLAY_ENTRIES,
    HISTORY_TIME_FORMAT,
    MSG_ANALYZING,
    MSG_FRAME_NOT_READY,
    MSG_HISTORY_EMPTY,
    MSG_HISTORY_HEADER,
    MSG_HISTORY_LINE,
    MSG_NEW_SESSION,
    MSG_RESULT,
    MSG_RESULT_LOG,
    MSG_STATUS,
    MSG_STATUS_NONE,
    STATUS_ICONS,
)
from homework_monitor.history import HistoryEntry, ResultHistory
from homework_monitor.models import AnalysisResult, FrameMessage, Invalid, Ok

logger = logging.getLogger(__name__)


# ── pure helpers ──────────────────────────────────────────────────────────────


def _percent(confidence: float) -> int:
    match confidence:
        case bool():
            return 0
        case int() | float():
            return round(confidence * 100)
        case _:
            return 0


def format_result(result: AnalysisResult) -> str:
    status = result.status.value
    return MSG_RESULT % (
        STATUS_ICONS.get(status, ""),
        status,
        _percent(result.confidence),
        result.message,
    )


def format_entry(entry: HistoryEntry) -> str:
    status = entry.result.status.value
    return MSG_HISTORY_LINE % (
        datetime.fromtimestamp(entry.timestamp).strftime(HISTORY_TIME_FORMAT),
        STATUS_ICONS.get(status, ""),
        status,
        _percent(entry.result.confidence),
    )


# ── monitor ───────────────────────────────────────────────────────────────────


class FocusMonitor:

    def __init__(self, analyzer: FrameAnalyzer, history: ResultHistory, provider: str) -> None:
        self._analyzer = analyzer
        self._history = history
        self._provider = provider

    async def handle(self, frame: FrameMessage) -> str:
        logger.info(MSG_ANALYZING, frame.sender, self._provider)
        match await self._analyzer.try_analyze(frame.image):
            case Invalid():
                return MSG_FRAME_NOT_READY
            case Ok(result):
                logger.info(
                    MSG_RESULT_LOG, frame.sender, result.status.value, _percent(result.confidence)
                )
                self._history.append(frame.sender, frame.timestamp, result)
                return format_result(result)

    def handle_status_command(self, sender: str) -> str:
        match self._history.latest(sender):
            case None:
                last = MSG_STATUS_NONE
            case entry:
                last = format_entry(entry)
        return MSG_STATUS % (self._provider, last)

    def handle_history_command(self, sender: str) -> str:
        match self._history.get(sender)[-HISTORY_DISPLAY_ENTRIES:]:
            case []:
                return MSG_HISTORY_EMPTY
            case entries:
                lines = [MSG_HISTORY_HEADER % len(entries)]
                lines += list(map(format_entry, entries))
                return "\n".join(lines)

    def handle_new_command(self, sender: str) -> str:
        self._history.clear(sender)
        return MSG_NEW_SESSION
