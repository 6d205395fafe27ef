"""
Shared pytest fixtures and configuration for all tests
"""
import base64
import pytest
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

# Add backend to Python path for imports
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from models.generation import EncodedImage, GatewayResult, SafetyRating  # noqa: E402

GENERATED_PAYLOAD = base64.b64encode(b"GENERATED").decode("ascii")

@pytest.fixture(autouse=True)
def reset_gemini_client():
    """Never reuse an SDK client across tests"""
    from core.gemini import GeminiClient
    GeminiClient.reset()
    yield
    GeminiClient.reset()

@pytest.fixture
def source_image():
    """A small PNG-typed source image"""
    payload = base64.b64encode(b"\x89PNG\r\n\x1a\nsource").decode("ascii")
    return EncodedImage(payload=payload, mime_type="image/png", display_name="old-photo.png")

@pytest.fixture
def style_image():
    payload = base64.b64encode(b"\xff\xd8\xffstyle").decode("ascii")
    return EncodedImage(payload=payload, mime_type="image/jpeg", display_name="painting.jpg")

@pytest.fixture
def person_image():
    payload = base64.b64encode(b"\x89PNG\r\n\x1a\nperson").decode("ascii")
    return EncodedImage(payload=payload, mime_type="image/png", display_name="me.png")

@pytest.fixture
def image_result():
    """Gateway result carrying a generated PNG"""
    return GatewayResult(image=EncodedImage(payload=GENERATED_PAYLOAD, mime_type="image/png"))

@pytest.fixture
def blocked_result():
    """Gateway result with no image and one non-negligible safety rating"""
    return GatewayResult(safety_ratings=[
        SafetyRating(category="HARM_CATEGORY_HARASSMENT", probability="NEGLIGIBLE"),
        SafetyRating(category="HARM_CATEGORY_DANGEROUS_CONTENT", probability="MEDIUM"),
    ])

@pytest.fixture
def gateway():
    """Stand-in for GeminiService with an awaitable generate()"""
    mock_gateway = MagicMock()
    mock_gateway.generate = AsyncMock()
    return mock_gateway
