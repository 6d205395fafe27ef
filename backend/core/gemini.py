from google import genai
from google.genai import types
from typing import Optional

from config.settings import settings
from core.errors import GatewayError

class GeminiClient:
    _instance: Optional[genai.Client] = None

    @classmethod
    def get_client(cls) -> genai.Client:
        if cls._instance is None:
            if not settings.GEMINI_API_KEY:
                raise GatewayError("Gemini API key not configured (set GEMINI_API_KEY or API_KEY)")

            cls._instance = genai.Client(
                api_key=settings.GEMINI_API_KEY,
                http_options=types.HttpOptions(timeout=settings.GATEWAY_TIMEOUT_MS),
            )

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

# Convenience function to get the client
def get_gemini() -> genai.Client:
    return GeminiClient.get_client()
