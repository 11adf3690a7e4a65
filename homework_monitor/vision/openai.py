"""OpenAIVisionClient — OpenAI GPT-4o vision backend."""
from openai import AsyncOpenAI

from homework_monitor.constants import (
    FOCUS_PROMPT,
    FRAME_DATA_URI_PREFIX,
    OPENAI_SCHEMA_NAME,
    OPENAI_VISION_MODEL,
    SYSTEM_INSTRUCTION,
)
from homework_monitor.vision.client import RESPONSE_SCHEMA, VisionClient


class OpenAIVisionClient(VisionClient):

    def __init__(self, api_key: str | None, model: str | None = None) -> None:
        super().__init__(api_key, model or OPENAI_VISION_MODEL, key_name="OPENAI_API_KEY")

    def _build_client(self, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(api_key=api_key)

    async def classify(self, image_b64: str) -> str | None:
        client = self.client()
        response = await client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": f"{FRAME_DATA_URI_PREFIX}{image_b64}"},
                        },
                        {"type": "text", "text": FOCUS_PROMPT},
                    ],
                },
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": OPENAI_SCHEMA_NAME,
                    "strict": True,
                    "schema": RESPONSE_SCHEMA,
                },
            },
        )
        return response.choices[0].message.content
