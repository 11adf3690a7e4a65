from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from homework_monitor.constants import (
    DEFAULT_HISTORY_MAX_ENTRIES,
    DEFAULT_LOG_LEVEL,
    PROVIDER_GEMINI,
    PROVIDERS,
)


@dataclass(frozen=True)
class Config:
    vision_provider: str
    vision_model: Optional[str]
    gemini_api_key: Optional[str]
    openai_api_key: Optional[str]
    anthropic_api_key: Optional[str]
    telegram_bot_token: Optional[str]
    allowed_chat_id: Optional[str]
    log_level: str
    history_max_entries: int

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        provider = os.getenv("VISION_PROVIDER", PROVIDER_GEMINI).strip().lower()
        model = os.getenv("VISION_MODEL") or None
        gemini_api_key = os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        token = os.getenv("TELEGRAM_BOT_TOKEN") or None
        chat_id = os.getenv("ALLOWED_CHAT_ID") or None
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
        history_max = os.getenv("HISTORY_MAX_ENTRIES", DEFAULT_HISTORY_MAX_ENTRIES)

        match provider:
            case p if p in PROVIDERS:
                pass
            case _:
                raise ValueError(
                    f"VISION_PROVIDER must be one of {', '.join(PROVIDERS)}, got {provider!r}"
                )

        match int(history_max):
            case n if n < 1:
                raise ValueError(f"HISTORY_MAX_ENTRIES must be at least 1, got {n}")
            case _:
                pass

        return cls(
            vision_provider=provider,
            vision_model=model,
            gemini_api_key=gemini_api_key,
            openai_api_key=openai_api_key,
            anthropic_api_key=anthropic_api_key,
            telegram_bot_token=token,
            allowed_chat_id=chat_id,
            log_level=log_level,
            history_max_entries=int(history_max),
        )

    def require_bot(self) -> None:
        """The Telegram entry point cannot start without both bot settings."""
        match self.telegram_bot_token:
            case None | "":
                raise ValueError("TELEGRAM_BOT_TOKEN must be set in .env")
            case _:
                pass

        match self.allowed_chat_id:
            case None | "":
                raise ValueError("ALLOWED_CHAT_ID must be set in .env")
            case _:
                pass
