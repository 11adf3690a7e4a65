"""TelegramClient — event-driven frame transport via python-telegram-bot."""
import base64
import logging
import time
from typing import Awaitable, Callable, Optional

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from homework_monitor.config import Config
from homework_monitor.constants import (
    CMD_HELP,
    CMD_HISTORY,
    CMD_NEW,
    CMD_STATUS,
    FRAME_DATA_URI_PREFIX,
    MSG_BLOCKED_CHAT,
    MSG_FRAME_ANALYSIS_FAILED,
    MSG_FRAME_DOWNLOAD_FAILED,
    MSG_FRAME_FAILED_LOG,
    MSG_HELP,
    MSG_NO_RESPONSE,
    MSG_SEND_FAIL,
    MSG_SEND_OK,
)
from homework_monitor.models import FrameMessage

logger = logging.getLogger(__name__)

OnFrame = Callable[[FrameMessage], Awaitable[str]]
OnCommand = Callable[[str], str]


def encode_frame(image_bytes: bytes) -> str:
    """Raw photo bytes → data-URI frame, the shape a browser camera capture has."""
    return FRAME_DATA_URI_PREFIX + base64.b64encode(image_bytes).decode()


class TelegramClient:

    def __init__(self, config: Config) -> None:
        self._token = config.telegram_bot_token
        self._allowed_chat_id = str(config.allowed_chat_id or "")
        self._app: Optional[Application] = None

    def run(
        self,
        on_frame: OnFrame,
        on_status: OnCommand | None = None,
        on_history: OnCommand | None = None,
        on_new: OnCommand | None = None,
    ) -> None:
        self._app = Application.builder().token(self._token).build()
        self._app.add_handler(
            TGMessageHandler(
                filters.PHOTO | filters.Document.IMAGE, self._make_frame_handler(on_frame)
            )
        )
        commands = ((CMD_STATUS, on_status), (CMD_HISTORY, on_history), (CMD_NEW, on_new))
        for name, callback in commands:
            if callback is not None:
                self._app.add_handler(CommandHandler(name, self._make_sender_handler(callback)))
        self._app.add_handler(
            CommandHandler(CMD_HELP, self._make_sender_handler(lambda _: MSG_HELP))
        )
        self._app.run_polling()

    async def send_message(self, to: str, text: str) -> bool:
        match self._app:
            case None:
                logger.error("send_message called before run()")
                return False
            case app:
                try:
                    await app.bot.send_message(chat_id=int(to), text=text)
                    return True
                except Exception as exc:
                    logger.error("Telegram send to %s failed: %s", to, exc)
                    return False

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        return str(update.effective_chat.id) == self._allowed_chat_id

    async def _download_frame(self, update: Update) -> Optional[str]:
        """Fetch the largest photo size, or an image document, as a frame."""
        msg = update.message
        if msg is None:
            return None
        match (msg.photo, msg.document):
            case ([_, *_] as photos, _):
                source = photos[-1]
            case (_, doc) if doc is not None:
                source = doc
            case _:
                return None
        tg_file = await source.get_file()
        return encode_frame(bytes(await tg_file.download_as_bytearray()))

    # ── internal handler factory ──────────────────────────────────────────────

    def _make_sender_handler(self, callback: OnCommand) -> Callable:
        """Handler for commands that pass the sender ID to the callback."""
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    return
                case True:
                    pass
            sender = str(update.effective_chat.id)
            await self.send_message(sender, callback(sender))

        return _handler

    def _make_frame_handler(self, on_frame: OnFrame) -> Callable:
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass

            sender = str(update.effective_chat.id)
            try:
                image = await self._download_frame(update)
            except Exception:
                logger.exception("Frame download failed")
                await self.send_message(sender, MSG_FRAME_DOWNLOAD_FAILED)
                return
            match image:
                case None:
                    return
                case _:
                    frame = FrameMessage(
                        sender=sender,
                        image=image,
                        timestamp=int(update.message.date.timestamp()),
                    )
                    await self._process(frame, on_frame)

        return _handler

    async def _process(self, frame: FrameMessage, on_frame: OnFrame) -> None:
        """Run one frame through ``on_frame``; an exception becomes a failure notice in the chat."""
        start = time.time()
        try:
            response = await on_frame(frame)
        except Exception:
            logger.exception(MSG_FRAME_FAILED_LOG, frame.sender, time.time() - start)
            await self.send_message(frame.sender, MSG_FRAME_ANALYSIS_FAILED)
            return

        elapsed = time.time() - start
        match response.strip() if response else "":
            case "":
                logger.warning(MSG_NO_RESPONSE, frame.sender)
            case text:
                sent = await self.send_message(frame.sender, text)
                log = logger.info if sent else logger.error
                log(MSG_SEND_OK if sent else MSG_SEND_FAIL, frame.sender, elapsed, frame.timestamp)
