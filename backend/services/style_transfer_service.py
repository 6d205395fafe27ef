from typing import Optional

from config.prompts import ANALYSIS_PROMPT, STYLE_PROMPT_TEMPLATE
from config.settings import settings
from core.errors import DescriptionUnavailable
from models.generation import (
    EncodedImage, ImagePart, Modality, StyleTransferPhase, StyleTransferResult, TextPart
)
from services.gemini_service import GeminiService, extract_image
from services.image_edit_service import validate_image

def compose_style_prompt(style_description: str) -> str:
    """Embed the style description verbatim into the generation prompt"""
    return STYLE_PROMPT_TEMPLATE.format(style_description=style_description)

class StyleTransferService:
    """
    Two-phase style transfer

    Phase 1 asks the analysis model to describe the style image. Phase 2
    feeds that description, wrapped in the identity-preserving template,
    to the image model together with the subject image. Phase 2 only runs
    once phase 1 produced a description.
    """

    def __init__(self, gateway: Optional[GeminiService] = None):
        self.gateway = gateway or GeminiService()
        self.phase = StyleTransferPhase.IDLE

    async def analyze_style(self, style_image: EncodedImage) -> str:
        """Phase 1: describe the style image. Raises DescriptionUnavailable on empty output"""
        self.phase = StyleTransferPhase.ANALYZING
        print(f"🎨 Analyzing style image with {settings.ANALYSIS_MODEL}")
        try:
            result = await self.gateway.generate(
                [TextPart(text=ANALYSIS_PROMPT), ImagePart(image=style_image)],
                Modality.TEXT,
                model=settings.ANALYSIS_MODEL,
            )
        except Exception:
            self.phase = StyleTransferPhase.ANALYSIS_FAILED
            raise

        if not result.text or not result.text.strip():
            self.phase = StyleTransferPhase.ANALYSIS_FAILED
            raise DescriptionUnavailable()

        self.phase = StyleTransferPhase.ANALYZED
        return result.text

    async def generate_styled(self, final_prompt: str, subject_image: EncodedImage) -> EncodedImage:
        """Phase 2: render the subject in the analyzed style"""
        self.phase = StyleTransferPhase.GENERATING
        print(f"🎨 Generating styled image with {settings.IMAGE_MODEL}")
        try:
            result = await self.gateway.generate(
                [TextPart(text=final_prompt), ImagePart(image=subject_image)],
                Modality.IMAGE,
                model=settings.IMAGE_MODEL,
            )
            image = extract_image(result)
        except Exception:
            self.phase = StyleTransferPhase.GENERATION_FAILED
            raise

        self.phase = StyleTransferPhase.GENERATED
        return image

    async def style_transfer(self, style_image: EncodedImage, subject_image: EncodedImage) -> StyleTransferResult:
        """
        Restyle the person in `subject_image` after `style_image`

        Returns:
            StyleTransferResult with the generated image and the exact prompt used for it
        """
        validate_image(style_image, "style image")
        validate_image(subject_image, "person image")

        style_description = await self.analyze_style(style_image)
        final_prompt = compose_style_prompt(style_description)
        image = await self.generate_styled(final_prompt, subject_image)

        return StyleTransferResult(image=image, used_prompt=final_prompt)
