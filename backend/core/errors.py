"""Failures raised by the generation pipeline and turned into `{"error": ...}` responses."""
from typing import Optional


class GenerationError(Exception):
    """Base class: carries a user-facing message and the HTTP status it maps to."""

    status_code: int = 500
    default_message: str = "An internal server error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InputFormatError(GenerationError):
    status_code = 400
    default_message = "Invalid base64 image data format."


class UnrecognizedAction(GenerationError):
    status_code = 400
    default_message = "Action not specified or invalid"


class SafetyRejected(GenerationError):
    default_message = (
        "Image generation was blocked due to safety policies. "
        "Please try a different prompt or image."
    )


class NoImageProduced(GenerationError):
    default_message = (
        "No image was generated. The model may not have been able to fulfil the request."
    )


class DescriptionUnavailable(GenerationError):
    default_message = "The style image could not be analyzed. No style description was produced."


class GatewayError(GenerationError):
    """Provider or transport failure; the provider's message is kept."""
