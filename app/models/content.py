"""
Pydantic models for publishing and thumbnail API requests and responses
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class PublishRequest(BaseModel):
    """Request model for POST /api/publish"""
    model_config = ConfigDict(populate_by_name=True)

    platforms: Optional[List[str]] = None
    content: Optional[str] = None
    media_urls: Optional[List[str]] = Field(None, alias='mediaUrls')
    scheduled_at: Optional[str] = Field(None, alias='scheduledAt')


class PublishResponse(BaseModel):
    """Response model for POST /api/publish"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    post_ids: Dict[str, str] = Field(default_factory=dict, alias='postIds')
    message: str


class BrandColors(BaseModel):
    primary: Optional[str] = None
    secondary: Optional[str] = None


class ThumbnailRequest(BaseModel):
    """Request model for POST /api/thumbnail"""
    model_config = ConfigDict(populate_by_name=True)

    transcript: Optional[str] = None
    title: Optional[str] = None
    brand_colors: Optional[BrandColors] = Field(None, alias='brandColors')
    style: Optional[str] = None
    custom_prompt: Optional[str] = Field(None, alias='customPrompt')


class ThumbnailResponse(BaseModel):
    """Response model for POST /api/thumbnail"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    image_url: Optional[str] = Field(None, alias='imageUrl')
    revised_prompt: Optional[str] = Field(None, alias='revisedPrompt')
