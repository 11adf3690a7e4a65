"""GeminiVisionClient — Google Gemini vision backend."""
import base64

from google import genai
from google.genai import types

from homework_monitor.constants import (
    CONFIDENCE_DESCRIPTION,
    FOCUS_PROMPT,
    FRAME_MIME_TYPE,
    GEMINI_VISION_MODEL,
    MESSAGE_DESCRIPTION,
    STATUS_DESCRIPTION,
    SYSTEM_INSTRUCTION,
)
from homework_monitor.models import CLASSIFIED_STATUSES
from homework_monitor.vision.client import VisionClient

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "status": types.Schema(
            type=types.Type.STRING,
            enum=[s.value for s in CLASSIFIED_STATUSES],
            description=STATUS_DESCRIPTION,
        ),
        "message": types.Schema(type=types.Type.STRING, description=MESSAGE_DESCRIPTION),
        "confidence": types.Schema(type=types.Type.NUMBER, description=CONFIDENCE_DESCRIPTION),
    },
    required=["status", "message", "confidence"],
)


class GeminiVisionClient(VisionClient):

    def __init__(self, api_key: str | None, model: str | None = None) -> None:
        super().__init__(api_key, model or GEMINI_VISION_MODEL, key_name="API_KEY")

    def _build_client(self, api_key: str) -> genai.Client:
        return genai.Client(api_key=api_key)

    async def classify(self, image_b64: str) -> str | None:
        client = self.client()
        image = types.Part.from_bytes(
            data=base64.b64decode(image_b64, validate=True),
            mime_type=FRAME_MIME_TYPE,
        )
        response = await client.aio.models.generate_content(
            model=self.model,
            contents=[image, FOCUS_PROMPT],
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=RESPONSE_SCHEMA,
                system_instruction=SYSTEM_INSTRUCTION,
            ),
        )
        return response.text
