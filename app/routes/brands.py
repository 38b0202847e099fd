"""
API routes for stored brand profiles
"""

import asyncio
import logging

from fastapi import APIRouter, Depends

from app.dependencies import error_response, get_brand_extractor, get_credentials
from app.models.brand import Brand, ListBrandsResponse, SaveBrandRequest, SaveBrandResponse
from core.brand_extractor import BrandExtractor, BrandProfile, Tone
from core.brand_store import BrandStore
from core.config import Credentials
from core.exceptions import FetchError, ParseError, StorageError
from core.url_normalizer import URLNormalizer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/brands", response_model=ListBrandsResponse)
async def list_brands(
    limit: int = 100,
    credentials: Credentials = Depends(get_credentials)
):
    """
    List saved brands, newest first

    Args:
        limit: Maximum number of brands to return
        credentials: Startup credentials (Supabase URL and key)
    """
    store = BrandStore(credentials.supabase_url, credentials.supabase_key)

    try:
        brands = await asyncio.to_thread(store.list_brands, limit)
    except StorageError as e:
        return error_response(str(e), status_code=500)

    return ListBrandsResponse(brands=brands, total=len(brands))


@router.post("/brands", response_model=SaveBrandResponse)
async def save_brand(
    request: SaveBrandRequest,
    extractor: BrandExtractor = Depends(get_brand_extractor),
    credentials: Credentials = Depends(get_credentials)
):
    """
    Save a brand profile

    The profile in the body is stored as-is when given (websiteUrl, or url,
    names its website); otherwise url is crawled first.

    Args:
        request: Website URL, optionally with an already extracted brand
        extractor: Brand extractor instance
        credentials: Startup credentials (Supabase URL and key)

    Returns:
        The stored brand row
    """
    website = request.website_url or request.url
    if not website or not website.strip():
        return error_response("URL is required")

    profile = None
    if request.brand is not None:
        try:
            profile = profile_from_brand(request.brand)
        except ValueError:
            return error_response(
                f"Invalid tone: {request.brand.tone}. Valid: {', '.join(t.value for t in Tone)}"
            )

    store = BrandStore(credentials.supabase_url, credentials.supabase_key)
    website_url = URLNormalizer.ensure_scheme(website)

    if profile is None:
        try:
            profile = await asyncio.to_thread(extractor.extract, website_url)
        except (FetchError, ParseError) as e:
            logger.warning(f"⚠️ Crawl failed for {website_url}: {e}")
            return error_response(str(e))

    try:
        row = await asyncio.to_thread(store.save, profile, website_url)
    except StorageError as e:
        return error_response(str(e), status_code=500)

    return SaveBrandResponse(success=True, brand=row)


def profile_from_brand(brand: Brand) -> BrandProfile:
    """
    Rebuild a BrandProfile from a brand sent by the client

    Raises:
        ValueError: If the tone is not a known Tone value
    """
    return BrandProfile(
        name=brand.name,
        description=brand.description,
        primary_color=brand.primary_color,
        secondary_color=brand.secondary_color,
        logo_url=brand.logo_url,
        favicon=brand.favicon,
        keywords=brand.keywords,
        tone=Tone(brand.tone),
    )
