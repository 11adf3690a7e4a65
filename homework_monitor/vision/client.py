"""VisionClient — abstract base for focus-classification backends."""
import threading
from abc import ABC, abstractmethod
from typing import Any

from homework_monitor.constants import (
    CONFIDENCE_DESCRIPTION,
    MESSAGE_DESCRIPTION,
    MSG_ERR_API_KEY_MISSING,
    STATUS_DESCRIPTION,
)
from homework_monitor.errors import ConfigurationError
from homework_monitor.models import CLASSIFIED_STATUSES

# JSON Schema of the reply every backend asks its service for.
RESPONSE_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "status": {
            "type": "string",
            "enum": [s.value for s in CLASSIFIED_STATUSES],
            "description": STATUS_DESCRIPTION,
        },
        "message": {"type": "string", "description": MESSAGE_DESCRIPTION},
        "confidence": {"type": "number", "description": CONFIDENCE_DESCRIPTION},
    },
    "required": ["status", "message", "confidence"],
    "additionalProperties": False,
}


class VisionClient(ABC):
    """Owns one lazily built SDK handle, reused for the backend's lifetime."""

    def __init__(self, api_key: str | None, model: str, key_name: str = "API_KEY") -> None:
        self._api_key = api_key
        self._key_name = key_name
        self.model = model
        self._handle: Any = None
        self._lock = threading.Lock()

    def client(self) -> Any:
        """Return the SDK handle, building it on first use.

        Raises ConfigurationError when no credential is configured; nothing is
        cached in that case so every call fails the same way.
        """
        match self._handle:
            case None:
                pass
            case handle:
                return handle
        with self._lock:
            if self._handle is None:
                match self._api_key:
                    case None | "":
                        raise ConfigurationError(MSG_ERR_API_KEY_MISSING % self._key_name)
                    case key:
                        self._handle = self._build_client(key)
            return self._handle

    @abstractmethod
    def _build_client(self, api_key: str) -> Any:
        """Construct the provider SDK client."""
        ...

    @abstractmethod
    async def classify(self, image_b64: str) -> str | None:
        """Send one raw base64 JPEG payload and return the reply text. Raises on failure."""
        ...
