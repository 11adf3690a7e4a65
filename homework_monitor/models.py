import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Union


class FocusStatus(str, Enum):
    FOCUSED = "FOCUSED"
    DISTRACTED = "DISTRACTED"
    ABSENT = "ABSENT"
    ERROR = "ERROR"


# Outcomes the vision service may report; ERROR is ours alone.
CLASSIFIED_STATUSES = (FocusStatus.FOCUSED, FocusStatus.DISTRACTED, FocusStatus.ABSENT)


@dataclass(frozen=True)
class AnalysisResult:
    status: FocusStatus
    message: str
    confidence: float

    @classmethod
    def from_json(cls, text: str) -> "AnalysisResult":
        """Parse a service reply. Raises ValueError/KeyError on malformed JSON.

        Field types are checked, values are not: a confidence outside 0-1 is
        passed through as the service sent it.
        """
        data = json.loads(text)
        match data:
            case {"message": str(), "confidence": bool() as other}:
                raise ValueError(f"confidence must be a number, got {other!r}")
            case {"message": str(), "confidence": int() | float()}:
                pass
            case {"message": str(), "confidence": other}:
                raise ValueError(f"confidence must be a number, got {other!r}")
            case {"message": other} if not isinstance(other, str):
                raise ValueError(f"message must be a string, got {other!r}")
            case _:
                pass
        return cls(
            status=FocusStatus(data["status"]),
            message=data["message"],
            confidence=data["confidence"],
        )

    @classmethod
    def error(cls, message: str) -> "AnalysisResult":
        return cls(status=FocusStatus.ERROR, message=message, confidence=0)

    def to_dict(self) -> dict:
        return {**asdict(self), "status": self.status.value}


@dataclass(frozen=True)
class Ok:
    result: AnalysisResult


@dataclass(frozen=True)
class Invalid:
    reason: str


Outcome = Union[Ok, Invalid]


@dataclass(frozen=True)
class FrameMessage:
    sender: str
    image: str
    timestamp: int
