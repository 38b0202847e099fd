"""
API routes for brand website crawling
"""

import asyncio
import logging

from fastapi import APIRouter, Depends

from app.dependencies import error_response, get_brand_extractor
from app.models.brand import Brand, CrawlRequest, CrawlResponse
from core.brand_extractor import BrandExtractor
from core.exceptions import FetchError, ParseError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/crawl", response_model=CrawlResponse, response_model_exclude_none=True)
async def crawl_brand(
    request: CrawlRequest,
    extractor: BrandExtractor = Depends(get_brand_extractor)
):
    """
    Crawl a brand website and return its brand profile

    Args:
        request: Body with the website URL (scheme optional)
        extractor: Brand extractor instance

    Returns:
        The extracted brand profile
    """
    if not request.url or not request.url.strip():
        return error_response("URL is required")

    try:
        profile = await asyncio.to_thread(extractor.extract, request.url)
    except (FetchError, ParseError) as e:
        logger.warning(f"⚠️ Crawl failed for {request.url}: {e}")
        return error_response(str(e))

    return CrawlResponse(success=True, brand=Brand(**profile.to_dict()))


@router.get("/crawl")
async def crawl_usage():
    """Usage information for the crawl endpoint"""
    return {
        "message": "Brand Crawler API - POST a URL to crawl",
        "example": {"url": "https://example.com"}
    }
