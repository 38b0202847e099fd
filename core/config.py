"""
Configuration management for brand_studio_backend
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Credentials:
    """API credentials loaded once at startup and injected into clients"""
    openai_api_key: Optional[str] = None
    blotato_api_key: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None


class Config:
    """Centralized configuration constants and environment management"""

    # HTTP timeouts (seconds)
    DEFAULT_TIMEOUT = 30
    CRAWL_TIMEOUT = 20
    LONG_TIMEOUT = 120

    # Browser user agent used for brand crawling
    CRAWLER_USER_AGENT = (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
    )

    # Blotato social publishing
    BLOTATO_API_URL = 'https://backend.blotato.com/v2/posts'

    # OpenAI image generation settings
    IMAGE_MODEL = 'dall-e-3'
    IMAGE_SIZE = '1792x1024'  # Landscape format suitable for thumbnails
    IMAGE_QUALITY = 'standard'
    TRANSCRIPT_PROMPT_CHARS = 500

    # Uploads
    UPLOAD_TYPES = ('video', 'audio', 'transcript')
    MAX_UPLOAD_SIZE_MB = 100

    # Supabase
    BRANDS_TABLE = 'brands'

    @staticmethod
    def get_default_headers() -> Dict[str, str]:
        """Get default HTTP headers for fetching brand pages"""
        return {
            'User-Agent': os.getenv('USER_AGENT', Config.CRAWLER_USER_AGENT),
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        }

    @staticmethod
    def get_upload_dir() -> str:
        """Directory where uploaded media and transcripts are written"""
        return os.getenv('UPLOAD_DIR', os.path.join(os.getcwd(), 'uploads'))

    @staticmethod
    def get_cors_origins() -> list:
        return os.getenv('CORS_ORIGINS', '*').split(',')

    @staticmethod
    def load_credentials() -> Credentials:
        """
        Read API credentials from the environment

        Called once at process startup; the resulting record is passed to the
        clients that need it instead of each client reading os.environ.

        Returns:
            Credentials with empty values normalized to None
        """
        def _get(name: str) -> Optional[str]:
            value = os.getenv(name, '').strip()
            return value or None

        return Credentials(
            openai_api_key=_get('OPENAI_API_KEY'),
            blotato_api_key=_get('BLOTATO_API_KEY'),
            supabase_url=_get('SUPABASE_URL'),
            supabase_key=_get('SUPABASE_SERVICE_ROLE_KEY'),
        )

    @staticmethod
    def validate_environment(credentials: Credentials) -> Dict[str, bool]:
        """Report which optional integrations are configured"""
        configured = {
            'OPENAI_API_KEY': bool(credentials.openai_api_key),
            'BLOTATO_API_KEY': bool(credentials.blotato_api_key),
            'SUPABASE': bool(credentials.supabase_url and credentials.supabase_key),
        }
        return {
            'configured': configured,
            'all_present': all(configured.values()),
        }
