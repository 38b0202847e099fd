"""
Social Publisher

Posts text + media to several social platforms through the Blotato
aggregator API.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests

from core.config import Config
from core.exceptions import ConfigurationError, PublishError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformConfig:
    """Posting limits for one social platform"""
    name: str
    max_chars: int
    supports_video: bool
    supports_image: bool


PLATFORM_CONFIG: Dict[str, PlatformConfig] = {
    'twitter': PlatformConfig('Twitter/X', 280, True, True),
    'linkedin': PlatformConfig('LinkedIn', 3000, True, True),
    'facebook': PlatformConfig('Facebook', 63206, True, True),
    'instagram': PlatformConfig('Instagram', 2200, True, True),
    'pinterest': PlatformConfig('Pinterest', 500, True, True),
    'tiktok': PlatformConfig('TikTok', 2200, True, False),
    'threads': PlatformConfig('Threads', 500, True, True),
    'bluesky': PlatformConfig('BlueSky', 300, False, True),
    'youtube': PlatformConfig('YouTube', 5000, True, True),
}


def find_invalid_platforms(platforms: List[str]) -> List[str]:
    """Platforms not present in PLATFORM_CONFIG, in request order"""
    return [p for p in platforms if p not in PLATFORM_CONFIG]


def content_length(content: str) -> int:
    """Length in UTF-16 code units, the way platform limits count characters"""
    return len(content.encode('utf-16-le')) // 2


def find_length_violations(platforms: List[str], content: str) -> List[str]:
    """
    Describe every platform whose character limit the content exceeds

    Returns:
        Entries like "Twitter/X (max 280 chars)"
    """
    violations = []
    for platform in platforms:
        config = PLATFORM_CONFIG[platform]
        if content_length(content) > config.max_chars:
            violations.append(f"{config.name} (max {config.max_chars} chars)")
    return violations


class SocialPublisher:
    """Client for the Blotato posts endpoint"""

    def __init__(self, api_key: Optional[str], session: Optional[requests.Session] = None,
                 api_url: str = Config.BLOTATO_API_URL):
        """
        Args:
            api_key: Blotato API key
            session: Optional requests session to use
            api_url: Posts endpoint

        Raises:
            ConfigurationError: If api_key is missing
        """
        if not api_key:
            raise ConfigurationError("BLOTATO_API_KEY is not configured")

        self.api_key = api_key
        self.api_url = api_url
        self.session = session or requests.Session()

    def publish(self, platforms: List[str], content: str, media_urls: Optional[List[str]] = None,
                scheduled_at: Optional[str] = None) -> Dict[str, str]:
        """
        Publish a post to the given platforms

        Args:
            platforms: Platform keys from PLATFORM_CONFIG
            content: Post text
            media_urls: Optional media attachments
            scheduled_at: Optional ISO-8601 time to schedule the post for

        Returns:
            Mapping of platform to the post id Blotato assigned

        Raises:
            PublishError: On a non-success response or network failure
        """
        payload = {
            'platforms': platforms,
            'content': content,
            'mediaUrls': media_urls or [],
        }
        if scheduled_at:
            payload['scheduledAt'] = scheduled_at

        logger.info(f"📤 Publishing to {', '.join(platforms)} ({content_length(content)} chars)")

        try:
            response = self.session.post(
                self.api_url,
                json=payload,
                headers={
                    'Authorization': f'Bearer {self.api_key}',
                    'Content-Type': 'application/json',
                },
                timeout=Config.DEFAULT_TIMEOUT
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Network error publishing to Blotato: {e}")
            raise PublishError(f"Network error: {e}") from e

        if not response.ok:
            logger.error(f"❌ Blotato API error: {response.status_code}")
            raise PublishError(f"Blotato API error: {response.status_code} - {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"❌ Blotato returned a non-JSON body: {e}")
            raise PublishError(f"Blotato API error: invalid response body: {e}") from e

        post_ids = (data.get('postIds') if isinstance(data, dict) else None) or {}
        logger.info(f"✅ Published to {len(platforms)} platform(s)")
        return post_ids
