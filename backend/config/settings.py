from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List

class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Settings
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "Image Restore API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # External APIs
    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )

    # Models
    IMAGE_MODEL: str = "gemini-2.5-flash-image"
    ANALYSIS_MODEL: str = "gemini-2.5-pro"

    # Gateway HTTP timeout handed to the SDK; the pipeline itself never times out
    GATEWAY_TIMEOUT_MS: int = 300_000

    # Upload validation
    ALLOWED_IMAGE_TYPES: List[str] = [
        "image/png",
        "image/jpeg",
        "image/jpg",
        "image/webp",
        "image/heic",
        "image/heif",
    ]
    VALIDATE_IMAGE_TYPES: bool = True

    # CORS Settings
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "*",
    ]

    def is_allowed_image_type(self, mime_type: str) -> bool:
        """Check a media type against the configured allow-list."""
        if not self.VALIDATE_IMAGE_TYPES:
            return bool(mime_type)
        return mime_type.lower() in self.ALLOWED_IMAGE_TYPES

# Global settings instance
settings = Settings()
