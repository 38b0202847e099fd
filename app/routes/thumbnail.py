"""
API routes for AI thumbnail generation
"""

import asyncio
import logging

from fastapi import APIRouter, Depends

from app.dependencies import error_response, get_credentials
from app.models.content import ThumbnailRequest, ThumbnailResponse
from core.config import Credentials
from core.exceptions import ThumbnailError
from core.thumbnail_generator import ThumbnailGenerator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/thumbnail", response_model=ThumbnailResponse)
async def generate_thumbnail(
    request: ThumbnailRequest,
    credentials: Credentials = Depends(get_credentials)
):
    """
    Generate a thumbnail image

    A custom prompt is sent as-is; otherwise the prompt is built from the
    transcript, title, brand colors and style.

    Args:
        request: Thumbnail parameters
        credentials: Startup credentials (OpenAI API key)
    """
    if not request.custom_prompt and not request.transcript:
        return error_response("Transcript or customPrompt is required")

    generator = ThumbnailGenerator(credentials.openai_api_key)

    try:
        if request.custom_prompt:
            result = await asyncio.to_thread(generator.generate_from_prompt, request.custom_prompt)
        else:
            brand_colors = request.brand_colors.model_dump() if request.brand_colors else None
            result = await asyncio.to_thread(
                generator.generate,
                request.transcript,
                request.title,
                brand_colors,
                request.style
            )
    except ThumbnailError as e:
        return error_response(str(e))

    return ThumbnailResponse(
        success=True,
        image_url=result.image_url,
        revised_prompt=result.revised_prompt
    )


@router.get("/thumbnail")
async def thumbnail_usage():
    """Usage information for the thumbnail endpoint"""
    return {
        "message": "Thumbnail Generation API - POST transcript to generate",
        "example": {
            "transcript": "Video content description...",
            "title": "Optional title",
            "brandColors": {"primary": "#ff0000", "secondary": "#0000ff"},
            "style": "professional | casual | bold | minimal",
        }
    }
