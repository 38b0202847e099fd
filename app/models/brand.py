"""
Pydantic models for brand crawling API requests and responses
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class CrawlRequest(BaseModel):
    """Request model for POST /api/crawl"""
    url: Optional[str] = None


class Brand(BaseModel):
    """Brand profile as returned to the web UI"""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    description: Optional[str] = None
    primary_color: Optional[str] = Field(None, alias='primaryColor')
    secondary_color: Optional[str] = Field(None, alias='secondaryColor')
    logo_url: Optional[str] = Field(None, alias='logoUrl')
    favicon: Optional[str] = None
    keywords: Optional[List[str]] = None
    tone: str


class CrawlResponse(BaseModel):
    """Response model for POST /api/crawl"""
    success: bool
    brand: Brand


class SaveBrandRequest(BaseModel):
    """
    Request model for POST /api/brands

    Either a url to crawl, or an already extracted brand plus the website it came from.
    """
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    brand: Optional[Brand] = None
    website_url: Optional[str] = Field(None, alias='websiteUrl')


class SaveBrandResponse(BaseModel):
    success: bool
    brand: Dict[str, Any]


class ListBrandsResponse(BaseModel):
    """Response model for GET /api/brands"""
    brands: List[Dict[str, Any]]
    total: int
