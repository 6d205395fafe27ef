from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from typing import List

from config.prompts import RESTORATION_EFFECTS
from config.settings import settings
from core.errors import GenerationError, InputFormatError, UnrecognizedAction
from models.generation import (
    EditRequest, EditResponse, ErrorResponse, RestorationEffect, StyleRequest, StyleResponse
)
from services.image_edit_service import ImageEditService, compose_restoration_instruction
from services.style_transfer_service import StyleTransferService

router = APIRouter(prefix="/generate", tags=["generate"])

def get_image_edit_service() -> ImageEditService:
    return ImageEditService()

def get_style_transfer_service() -> StyleTransferService:
    return StyleTransferService()

def error_response(error: GenerationError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(error=error.message).model_dump(),
    )

def describe_validation_error(error: ValidationError) -> str:
    details = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        details.append(f"{location}: {item.get('msg')}" if location else item.get("msg", ""))
    return "Invalid request: " + "; ".join(details)

async def handle_edit(edit_request: EditRequest) -> EditResponse:
    source_image = edit_request.image.to_encoded_image()

    if edit_request.effects:
        instruction = compose_restoration_instruction(edit_request.effects, edit_request.prompt)
    else:
        instruction = edit_request.prompt

    image = await get_image_edit_service().edit(instruction, source_image)
    return EditResponse(image=image.to_data_uri())

async def handle_style(style_request: StyleRequest) -> StyleResponse:
    style_image = style_request.styleImage.to_encoded_image()
    person_image = style_request.personImage.to_encoded_image()

    result = await get_style_transfer_service().style_transfer(style_image, person_image)
    return StyleResponse(image=result.image.to_data_uri(), prompt=result.used_prompt)

@router.post("", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def generate(request: Request):
    """Edit an image or run a style transfer, selected by the `action` field"""
    try:
        try:
            body = await request.json()
        except ValueError:
            raise InputFormatError("Request body must be a JSON object")

        action = body.get("action") if isinstance(body, dict) else None

        if action == "edit":
            return await handle_edit(EditRequest.model_validate(body))
        elif action == "style":
            return await handle_style(StyleRequest.model_validate(body))
        else:
            raise UnrecognizedAction()

    except ValidationError as e:
        error = InputFormatError(describe_validation_error(e))
        print(f"❌ Rejected generate request: {error.message}")
        return error_response(error)
    except GenerationError as e:
        print(f"❌ Generate request failed ({type(e).__name__}): {e.message}")
        return error_response(e)
    except Exception as e:
        print(f"❌ Error in generate endpoint: {str(e)}")
        return error_response(GenerationError(str(e) or None))

@router.get("/effects", response_model=List[RestorationEffect])
async def list_restoration_effects():
    """List the restoration presets accepted in `effects`"""
    return [
        RestorationEffect(key=key, label=effect["label"], description=effect["description"])
        for key, effect in RESTORATION_EFFECTS.items()
    ]

@router.get("/health")
async def check_gemini_config():
    """Check if Gemini is properly configured"""
    has_key = bool(settings.GEMINI_API_KEY)

    return {
        "configured": has_key,
        "image_model": settings.IMAGE_MODEL,
        "analysis_model": settings.ANALYSIS_MODEL,
        "message": "Gemini API key configured" if has_key else "Gemini API key not set"
    }
