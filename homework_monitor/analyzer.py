"""FrameAnalyzer — validates a frame, asks the vision backend, maps the reply."""
import logging
import re

from homework_monitor.constants import (
    DATA_URI_PATTERN,
    EMPTY_DATA_URI,
    MIN_FRAME_LENGTH,
    MSG_ERR_CONNECTION,
    MSG_ERR_EMPTY_RESPONSE,
    MSG_ERR_INVALID_FRAME,
)
from homework_monitor.errors import EmptyResponseError, InvalidInputError
from homework_monitor.models import AnalysisResult, Invalid, Ok, Outcome
from homework_monitor.vision.client import VisionClient

logger = logging.getLogger(__name__)

_DATA_URI = re.compile(DATA_URI_PATTERN)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def validate_frame(image: str | None) -> None:
    """Cheap sanity filter, not a decode check. Raises InvalidInputError."""
    match image:
        case None | "":
            raise InvalidInputError(MSG_ERR_INVALID_FRAME)
        case str() as s if s == EMPTY_DATA_URI or len(s) < MIN_FRAME_LENGTH:
            raise InvalidInputError(MSG_ERR_INVALID_FRAME)
        case _:
            pass


def strip_data_uri(image: str) -> str:
    return _DATA_URI.sub("", image, count=1)


# ── analyzer ──────────────────────────────────────────────────────────────────


class FrameAnalyzer:
    """Turns one base64 frame into an AnalysisResult.

    Only InvalidInputError escapes ``analyze``; every other failure comes back
    as an ERROR result so callers have a single display path.
    """

    def __init__(self, vision: VisionClient) -> None:
        self._vision = vision

    async def analyze(self, image: str) -> AnalysisResult:
        validate_frame(image)
        payload = strip_data_uri(image)
        try:
            text = await self._vision.classify(payload)
            match text:
                case None | "":
                    raise EmptyResponseError(MSG_ERR_EMPTY_RESPONSE)
                case _:
                    return AnalysisResult.from_json(text)
        except InvalidInputError:
            raise
        except Exception as exc:
            logger.error("Analysis failed: %s", exc)
            return AnalysisResult.error(str(exc) or MSG_ERR_CONNECTION)

    async def try_analyze(self, image: str) -> Outcome:
        """Like ``analyze`` but reports an unusable frame as ``Invalid``."""
        try:
            return Ok(await self.analyze(image))
        except InvalidInputError as exc:
            logger.debug("Frame rejected: %s", exc)
            return Invalid(str(exc))
