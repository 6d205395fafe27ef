"""
Layer 1: Encoded image value tests

These tests validate data URI handling before anything reaches the model.
"""
import pytest
from pydantic import ValidationError

from core.errors import InputFormatError
from models.generation import EncodedImage, ImagePayload


@pytest.mark.unit
class TestFromDataUri:
    """Tests for stripping the data URI header"""

    def test_strips_header(self):
        image = EncodedImage.from_data_uri("data:image/png;base64,AAAA", "image/png")

        assert image.payload == "AAAA"
        assert image.mime_type == "image/png"

    def test_keeps_everything_after_first_comma(self):
        image = EncodedImage.from_data_uri("data:image/png;base64,AA,AA", "image/png")

        assert image.payload == "AA,AA"

    def test_no_comma_is_rejected(self):
        with pytest.raises(InputFormatError):
            EncodedImage.from_data_uri("AAAA", "image/png")

    def test_empty_payload_is_rejected(self):
        with pytest.raises(InputFormatError):
            EncodedImage.from_data_uri("data:image/png;base64,", "image/png")

    def test_empty_string_is_rejected(self):
        with pytest.raises(InputFormatError):
            EncodedImage.from_data_uri("", "image/png")

    def test_transport_payload_conversion(self):
        payload = ImagePayload(base64="data:image/webp;base64,UklGRg==", mimeType="image/webp", name="a.webp")
        image = payload.to_encoded_image()

        assert image.payload == "UklGRg=="
        assert image.mime_type == "image/webp"
        assert image.display_name == "a.webp"


@pytest.mark.unit
class TestEncodedImageValue:
    """Tests for rendering and decoding"""

    def test_to_data_uri(self):
        image = EncodedImage(payload="AAAA", mime_type="image/jpeg")

        assert image.to_data_uri() == "data:image/jpeg;base64,AAAA"

    def test_to_bytes(self):
        image = EncodedImage(payload="AAAA", mime_type="image/png")

        assert image.to_bytes() == b"\x00\x00\x00"

    def test_invalid_base64_is_rejected(self):
        image = EncodedImage(payload="not base64!", mime_type="image/png")

        with pytest.raises(InputFormatError):
            image.to_bytes()

    def test_is_immutable(self, source_image):
        with pytest.raises(ValidationError):
            source_image.payload = "BBBB"
