"""
Shared FastAPI dependencies and response helpers
"""

import logging
from functools import lru_cache

from fastapi.responses import JSONResponse

from core.brand_extractor import BrandExtractor
from core.config import Config, Credentials

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_credentials() -> Credentials:
    """Credentials read once per process (first call happens during startup)"""
    credentials = Config.load_credentials()
    logger.info("✅ Credentials loaded")
    return credentials


def get_brand_extractor() -> BrandExtractor:
    """A fresh extractor per request; concurrent crawls share nothing"""
    return BrandExtractor()


def error_response(message: str, status_code: int = 400, **extra) -> JSONResponse:
    """Build the {"success": false, "error": ...} envelope the web UI expects"""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra}
    )
