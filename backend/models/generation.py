from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal, Union
from enum import Enum
import base64
import binascii

from core.errors import InputFormatError


class EncodedImage(BaseModel):
    """Image bytes carried as base64 text plus their media type."""

    model_config = ConfigDict(frozen=True)

    payload: str
    mime_type: str
    display_name: Optional[str] = None

    @classmethod
    def from_data_uri(cls, data: str, mime_type: str, display_name: Optional[str] = None) -> "EncodedImage":
        """
        Build an image from a data URI, keeping only what follows the first comma

        Raises:
            InputFormatError: if there is no comma-delimited payload
        """
        if not data or "," not in data:
            raise InputFormatError()

        payload = data.split(",", 1)[1].strip()
        if not payload:
            raise InputFormatError()

        return cls(payload=payload, mime_type=mime_type, display_name=display_name)

    def to_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.payload}"

    def to_bytes(self) -> bytes:
        try:
            return base64.b64decode(self.payload, validate=True)
        except (binascii.Error, ValueError):
            raise InputFormatError("Image payload is not valid base64 data.")


# Gateway parts

class Modality(str, Enum):
    IMAGE = "IMAGE"
    TEXT = "TEXT"


class TextPart(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class ImagePart(BaseModel):
    kind: Literal["image"] = "image"
    image: EncodedImage


ModelPart = Union[TextPart, ImagePart]


class SafetyRating(BaseModel):
    category: Optional[str] = None
    probability: Optional[str] = None

    @property
    def is_negligible(self) -> bool:
        return self.probability == "NEGLIGIBLE"


class GatewayResult(BaseModel):
    """First candidate of a gateway response, reduced to what the pipeline reads."""
    image: Optional[EncodedImage] = None
    text: Optional[str] = None
    safety_ratings: List[SafetyRating] = []


# Orchestrator results

class StyleTransferPhase(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    ANALYZED = "analyzed"
    ANALYSIS_FAILED = "analysis_failed"
    GENERATING = "generating"
    GENERATED = "generated"
    GENERATION_FAILED = "generation_failed"


class StyleTransferResult(BaseModel):
    image: EncodedImage
    used_prompt: str


# Transport payloads

class ImagePayload(BaseModel):
    base64: str
    mimeType: str
    name: Optional[str] = None

    def to_encoded_image(self) -> EncodedImage:
        return EncodedImage.from_data_uri(self.base64, self.mimeType, self.name)


class EditRequest(BaseModel):
    action: Literal["edit"] = "edit"
    prompt: str = ""
    image: ImagePayload
    effects: List[str] = Field(default_factory=list)


class StyleRequest(BaseModel):
    action: Literal["style"] = "style"
    styleImage: ImagePayload
    personImage: ImagePayload


class EditResponse(BaseModel):
    image: str


class StyleResponse(BaseModel):
    image: str
    prompt: str


class ErrorResponse(BaseModel):
    error: str


class RestorationEffect(BaseModel):
    key: str
    label: str
    description: str
