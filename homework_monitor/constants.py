"""Prompt text, limits, model ids and every user-facing message."""

# Frame validation
MIN_FRAME_LENGTH = 100
EMPTY_DATA_URI = "data:,"
DATA_URI_PATTERN = r"^data:image/(png|jpeg|jpg);base64,"
FRAME_MIME_TYPE = "image/jpeg"
FRAME_DATA_URI_PREFIX = "data:image/jpeg;base64,"

# Vision providers
PROVIDER_GEMINI = "gemini"
PROVIDER_OPENAI = "openai"
PROVIDER_CLAUDE = "claude"
PROVIDERS = (PROVIDER_GEMINI, PROVIDER_OPENAI, PROVIDER_CLAUDE)
GEMINI_VISION_MODEL = "gemini-2.5-flash"
OPENAI_VISION_MODEL = "gpt-4o"
CLAUDE_VISION_MODEL = "claude-sonnet-4-5-20250929"
CLAUDE_MAX_TOKENS = 1024
CLAUDE_TOOL_NAME = "report_focus"
OPENAI_SCHEMA_NAME = "focus_assessment"

# Request template sent with every frame
SYSTEM_INSTRUCTION = "You are a homework monitoring assistant. Be strict but kind."
FOCUS_PROMPT = (
    "Analyze this image of a student doing homework.\n"
    "Determine if they are FOCUSED (looking at paper/book, writing, reading),\n"
    "DISTRACTED (looking away, playing with toys, sleeping, using phone),\n"
    "or ABSENT (empty chair).\n"
    "Provide a short voice message text in Chinese.\n"
    'If FOCUSED, say something encouraging like "很棒，继续保持".\n'
    'If DISTRACTED, say something gentle like "请专心写作业哦".\n'
    'If ABSENT, say "人去哪里了".'
)
STATUS_DESCRIPTION = "The assessed state of the student."
MESSAGE_DESCRIPTION = (
    "A short, encouraging or correcting message in Chinese (Mandarin) suitable for a child."
)
CONFIDENCE_DESCRIPTION = "Confidence level between 0 and 1."

# Analyzer errors
MSG_ERR_INVALID_FRAME = "Invalid frame captured (empty data)"
MSG_ERR_API_KEY_MISSING = "API key is missing. Please check the %s setting."
MSG_ERR_EMPTY_RESPONSE = "No response from AI"
MSG_ERR_CONNECTION = "连接 AI 失败"

# Config
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HISTORY_MAX_ENTRIES = "20"

# Log / user-facing messages
MSG_BOT_STARTING = "Starting homework monitor bot…"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_NO_RESPONSE = "No reply generated for %s"
MSG_SEND_OK = "✓ Reply to %s sent (%.1fs, frame at %d)"
MSG_SEND_FAIL = "✗ Reply to %s failed (%.1fs, frame at %d)"
MSG_FRAME_FAILED_LOG = "Frame from %s failed after %.1fs"
MSG_ANALYZING = "Analyzing frame from %s via %s"
MSG_RESULT_LOG = "%s → %s (%d%%)"
MSG_FRAME_NOT_READY = "Frame not ready — send a clearer photo."
MSG_FRAME_DOWNLOAD_FAILED = "Could not read that photo — please try again."
MSG_FRAME_ANALYSIS_FAILED = "Could not check that photo. Please try again."
MSG_RESULT = "%s %s (%d%%)\n%s"

STATUS_ICONS = {
    "FOCUSED": "✅",
    "DISTRACTED": "⚠️",
    "ABSENT": "🪑",
    "ERROR": "❌",
}

CMD_STATUS = "status"
MSG_STATUS = (
    "Status\n"
    "  Provider    : %s\n"
    "  Last result : %s\n"
)
MSG_STATUS_NONE = "none yet"

CMD_NEW = "new"
MSG_NEW_SESSION = "History cleared — starting a new session."

CMD_HISTORY = "history"
HISTORY_DISPLAY_ENTRIES = 10
MSG_HISTORY_EMPTY = "No results yet — send a photo first."
MSG_HISTORY_HEADER = "Last %d results:\n"
MSG_HISTORY_LINE = "%s  %s %s (%d%%)"
HISTORY_TIME_FORMAT = "%H:%M:%S"

CMD_HELP = "help"
MSG_HELP = (
    "homework-monitor — focus checks over Telegram\n"
    "\n"
    "Commands:\n"
    "  /help     — show this message\n"
    "  /status   — provider and last result\n"
    "  /history  — recent results\n"
    "  /new      — clear the result history\n"
    "\n"
    "Media:\n"
    "  Photo     — classified as FOCUSED, DISTRACTED or ABSENT\n"
)
