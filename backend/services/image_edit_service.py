from typing import List, Optional

from config.prompts import (
    RESTORATION_EFFECTS,
    RESTORATION_EFFECTS_TEMPLATE,
    RESTORATION_INSTRUCTION_TEMPLATE,
    RESTORATION_PREFIX,
)
from config.settings import settings
from core.errors import InputFormatError
from models.generation import EncodedImage, ImagePart, Modality, TextPart
from services.gemini_service import GeminiService, extract_image

def validate_image(image: Optional[EncodedImage], label: str = "image") -> EncodedImage:
    """Reject missing images, undecodable payloads and unrecognized media types before any model call"""
    if image is None:
        raise InputFormatError(f"Missing required {label}.")
    if not image.payload:
        raise InputFormatError(f"The {label} has no image data.")
    if not settings.is_allowed_image_type(image.mime_type or ""):
        raise InputFormatError(f"Unsupported media type for {label}: '{image.mime_type}'")
    try:
        image.to_bytes()
    except InputFormatError:
        raise InputFormatError(f"The {label} is not valid base64 data.")
    return image

def compose_restoration_instruction(effects: List[str], instruction: str = "") -> str:
    """
    Flatten selected restoration effects and free text into one edit instruction

    Args:
        effects: Keys from RESTORATION_EFFECTS, in the order selected
        instruction: Optional extra instruction from the user

    Returns:
        The instruction text sent with the image
    """
    unknown = [effect for effect in effects if effect not in RESTORATION_EFFECTS]
    if unknown:
        raise InputFormatError(f"Unknown restoration effect(s): {', '.join(unknown)}")

    instruction = (instruction or "").strip()
    if not effects and not instruction:
        raise InputFormatError("Select a restoration effect or describe the edit.")

    final_prompt = RESTORATION_PREFIX
    if effects:
        labels = ", ".join(RESTORATION_EFFECTS[effect]["label"] for effect in effects)
        final_prompt += RESTORATION_EFFECTS_TEMPLATE.format(effects=labels)
    if instruction:
        final_prompt += RESTORATION_INSTRUCTION_TEMPLATE.format(instruction=instruction)
    return final_prompt

class ImageEditService:
    """Single-pass instruction-guided edit: one image model call per request."""

    def __init__(self, gateway: Optional[GeminiService] = None):
        self.gateway = gateway or GeminiService()

    async def edit(self, instruction: str, source_image: EncodedImage) -> EncodedImage:
        """Edit `source_image` following `instruction`; the result keeps the media type the model reports"""
        if not instruction or not instruction.strip():
            raise InputFormatError("An edit instruction is required.")
        validate_image(source_image, "source image")

        print(f"✏️ Editing image ({source_image.mime_type}) with {settings.IMAGE_MODEL}")
        result = await self.gateway.generate(
            [ImagePart(image=source_image), TextPart(text=instruction)],
            Modality.IMAGE,
            model=settings.IMAGE_MODEL,
        )
        return extract_image(result)
