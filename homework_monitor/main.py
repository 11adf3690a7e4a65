"""Entry point — wires Config → VisionClient → FocusMonitor → TelegramClient."""
import logging

from rich.logging import RichHandler

from homework_monitor.analyzer import FrameAnalyzer
from homework_monitor.config import Config
from homework_monitor.constants import MSG_BOT_STARTING
from homework_monitor.history import ResultHistory
from homework_monitor.monitor import FocusMonitor
from homework_monitor.telegram.client import TelegramClient
from homework_monitor.vision.claude import ClaudeVisionClient
from homework_monitor.vision.client import VisionClient
from homework_monitor.vision.gemini import GeminiVisionClient
from homework_monitor.vision.openai import OpenAIVisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_vision_client(config: Config) -> VisionClient:
    """The credential is only checked when the first frame is analyzed."""
    match config.vision_provider:
        case "openai":
            return OpenAIVisionClient(config.openai_api_key, config.vision_model)
        case "claude":
            return ClaudeVisionClient(config.anthropic_api_key, config.vision_model)
        case _:
            return GeminiVisionClient(config.gemini_api_key, config.vision_model)


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)
    config.require_bot()

    logger = logging.getLogger(__name__)
    logger.info(MSG_BOT_STARTING)

    vision = build_vision_client(config)
    monitor = FocusMonitor(
        FrameAnalyzer(vision),
        ResultHistory(max_per_sender=config.history_max_entries),
        provider=f"{config.vision_provider} ({vision.model})",
    )
    client = TelegramClient(config)
    client.run(
        monitor.handle,
        on_status=monitor.handle_status_command,
        on_history=monitor.handle_history_command,
        on_new=monitor.handle_new_command,
    )


if __name__ == "__main__":
    main()
