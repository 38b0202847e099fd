"""
API routes for publishing posts to social platforms
"""

import asyncio
import logging

from fastapi import APIRouter, Depends

from app.dependencies import error_response, get_credentials
from app.models.content import PublishRequest, PublishResponse
from core.config import Credentials
from core.exceptions import PublishError
from core.social_publisher import (
    PLATFORM_CONFIG,
    SocialPublisher,
    content_length,
    find_invalid_platforms,
    find_length_violations,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/publish", response_model=PublishResponse)
async def publish_post(
    request: PublishRequest,
    credentials: Credentials = Depends(get_credentials)
):
    """
    Publish content to one or more social platforms via Blotato

    Args:
        request: Platforms, content, optional media URLs and schedule time
        credentials: Startup credentials (Blotato API key)

    Returns:
        Post ids per platform
    """
    platforms = request.platforms
    if not platforms:
        return error_response("At least one platform is required")

    invalid = find_invalid_platforms(platforms)
    if invalid:
        return error_response(
            f"Invalid platforms: {', '.join(invalid)}. Valid: {', '.join(PLATFORM_CONFIG)}"
        )

    content = request.content
    if not content:
        return error_response("Content is required")

    too_long = find_length_violations(platforms, content)
    if too_long:
        return error_response(
            f"Content exceeds limit for: {', '.join(too_long)}",
            currentLength=content_length(content)
        )

    publisher = SocialPublisher(credentials.blotato_api_key)

    try:
        post_ids = await asyncio.to_thread(
            publisher.publish,
            platforms,
            content,
            request.media_urls,
            request.scheduled_at
        )
    except PublishError as e:
        return error_response(str(e))

    return PublishResponse(
        success=True,
        post_ids=post_ids,
        message=f"Successfully published to {len(platforms)} platform(s)"
    )


@router.get("/publish")
async def publish_usage():
    """Usage information and the supported platform table"""
    return {
        "message": "Social Media Publish API - POST to publish content",
        "availablePlatforms": [
            {
                "id": key,
                "name": config.name,
                "maxChars": config.max_chars,
                "supportsVideo": config.supports_video,
                "supportsImage": config.supports_image,
            }
            for key, config in PLATFORM_CONFIG.items()
        ],
        "example": {
            "platforms": ["twitter", "linkedin"],
            "content": "Post content here...",
            "mediaUrls": ["https://example.com/video.mp4"],
            "scheduledAt": "2025-01-01T12:00:00Z",
        }
    }
