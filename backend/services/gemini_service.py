import base64
import httpx
from google import genai
from google.genai import errors, types
from typing import List, Optional

from config.settings import settings
from core.errors import GatewayError, NoImageProduced, SafetyRejected
from core.gemini import get_gemini
from models.generation import (
    EncodedImage, GatewayResult, ImagePart, Modality, ModelPart, SafetyRating, TextPart
)

def _enum_value(value) -> Optional[str]:
    if value is None:
        return None
    return getattr(value, "value", str(value))

def extract_image(result: GatewayResult) -> EncodedImage:
    """
    Unwrap the generated image from a gateway result

    Raises:
        SafetyRejected: no image and any rating above negligible
        NoImageProduced: no image and nothing flagged
    """
    if result.image is not None:
        return result.image

    if any(not rating.is_negligible for rating in result.safety_ratings):
        raise SafetyRejected()
    raise NoImageProduced()

class GeminiService:
    """Model gateway: sends ordered text/image parts to Gemini and reads the first candidate."""

    def __init__(self, client: Optional[genai.Client] = None):
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = get_gemini()
        return self._client

    @staticmethod
    def to_sdk_part(part: ModelPart) -> types.Part:
        if isinstance(part, ImagePart):
            return types.Part.from_bytes(data=part.image.to_bytes(), mime_type=part.image.mime_type)
        if isinstance(part, TextPart):
            return types.Part.from_text(text=part.text)
        raise TypeError(f"Unsupported model part: {type(part).__name__}")

    @staticmethod
    def to_result(response: types.GenerateContentResponse) -> GatewayResult:
        """Reduce a provider response to its first candidate's image, text and safety ratings"""
        candidates = response.candidates or []
        if not candidates:
            return GatewayResult()

        candidate = candidates[0]
        parts = candidate.content.parts if candidate.content and candidate.content.parts else []

        image = None
        texts = []
        for part in parts:
            if part.inline_data and part.inline_data.data:
                if image is None:
                    image = EncodedImage(
                        payload=base64.b64encode(part.inline_data.data).decode("ascii"),
                        mime_type=part.inline_data.mime_type or "image/png",
                    )
            elif part.text and not part.thought:
                texts.append(part.text)

        safety_ratings = [
            SafetyRating(category=_enum_value(rating.category), probability=_enum_value(rating.probability))
            for rating in candidate.safety_ratings or []
        ]

        return GatewayResult(
            image=image,
            text="".join(texts) if texts else None,
            safety_ratings=safety_ratings,
        )

    async def generate(
        self,
        parts: List[ModelPart],
        modality: Modality,
        model: Optional[str] = None,
    ) -> GatewayResult:
        """
        Issue one generate_content call

        Args:
            parts: Ordered text/image parts sent as a single user turn
            modality: Requested output modality
            model: Model name, defaults to the configured image model

        Returns:
            GatewayResult for the first candidate

        Raises:
            InputFormatError: if an image payload is not valid base64
            GatewayError: on provider or transport failure
        """
        contents = types.Content(role="user", parts=[self.to_sdk_part(part) for part in parts])
        config = types.GenerateContentConfig(response_modalities=[modality.value])
        model_name = model or settings.IMAGE_MODEL

        try:
            response = await self.client.aio.models.generate_content(
                model=model_name,
                contents=contents,
                config=config,
            )
        except errors.APIError as error:
            print(f"❌ Gemini API error ({model_name}): {error}")
            raise GatewayError(error.message or str(error))
        except httpx.TimeoutException:
            raise GatewayError("Request timeout - Gemini API may be slow")
        except httpx.HTTPError as error:
            raise GatewayError(f"Error calling Gemini API: {str(error)}")

        return self.to_result(response)
