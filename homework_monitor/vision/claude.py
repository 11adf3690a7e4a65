"""ClaudeVisionClient — Anthropic Claude vision backend.

Claude has no JSON response mode, so the reply schema is the input schema of
a tool the model is forced to call; the tool input is the assessment.
"""
import json

from anthropic import AsyncAnthropic

from homework_monitor.constants import (
    CLAUDE_MAX_TOKENS,
    CLAUDE_TOOL_NAME,
    CLAUDE_VISION_MODEL,
    FOCUS_PROMPT,
    FRAME_MIME_TYPE,
    SYSTEM_INSTRUCTION,
)
from homework_monitor.vision.client import RESPONSE_SCHEMA, VisionClient

REPORT_TOOL = {
    "name": CLAUDE_TOOL_NAME,
    "description": "Report the student's focus assessment.",
    "input_schema": RESPONSE_SCHEMA,
}


class ClaudeVisionClient(VisionClient):

    def __init__(self, api_key: str | None, model: str | None = None) -> None:
        super().__init__(api_key, model or CLAUDE_VISION_MODEL, key_name="ANTHROPIC_API_KEY")

    def _build_client(self, api_key: str) -> AsyncAnthropic:
        return AsyncAnthropic(api_key=api_key)

    async def classify(self, image_b64: str) -> str | None:
        client = self.client()
        message = await client.messages.create(
            model=self.model,
            max_tokens=CLAUDE_MAX_TOKENS,
            system=SYSTEM_INSTRUCTION,
            tools=[REPORT_TOOL],
            tool_choice={"type": "tool", "name": CLAUDE_TOOL_NAME},
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": FRAME_MIME_TYPE,
                                "data": image_b64,
                            },
                        },
                        {"type": "text", "text": FOCUS_PROMPT},
                    ],
                }
            ],
        )
        tool_inputs = [b.input for b in message.content if b.type == "tool_use"]
        match tool_inputs:
            case []:
                return None
            case [first, *_]:
                return json.dumps(first, ensure_ascii=False)
