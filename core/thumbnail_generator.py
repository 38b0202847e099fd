"""
Thumbnail Generator

Builds an image prompt from a transcript and brand colors and sends it to
the OpenAI image generation API.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from openai import OpenAI

from core.config import Config
from core.exceptions import ConfigurationError, ThumbnailError

logger = logging.getLogger(__name__)


STYLE_DESCRIPTIONS = {
    'professional': 'clean, corporate, modern design with professional lighting',
    'casual': 'friendly, approachable, warm colors and inviting atmosphere',
    'bold': 'high contrast, eye-catching, dynamic composition with bold typography',
    'minimal': 'simple, clean lines, lots of white space, elegant and sophisticated',
}

DEFAULT_STYLE = 'professional'


@dataclass(frozen=True)
class ThumbnailResult:
    image_url: Optional[str]
    revised_prompt: Optional[str] = None


def build_thumbnail_prompt(transcript: str, title: Optional[str] = None,
                           brand_colors: Optional[Dict[str, Optional[str]]] = None,
                           style: Optional[str] = None) -> str:
    """
    Compose the image prompt for a video thumbnail

    Args:
        transcript: Video transcript; only the opening is used when no title is given
        title: Optional video title
        brand_colors: Optional {"primary": ..., "secondary": ...}
        style: One of STYLE_DESCRIPTIONS keys (defaults to professional)

    Returns:
        Prompt text
    """
    subject = title or transcript[:Config.TRANSCRIPT_PROMPT_CHARS]
    style_desc = STYLE_DESCRIPTIONS.get(style or DEFAULT_STYLE, STYLE_DESCRIPTIONS[DEFAULT_STYLE])

    color_guidance = ''
    brand_colors = brand_colors or {}
    if brand_colors.get('primary'):
        color_guidance = f"Use {brand_colors['primary']} as the dominant color. "
        if brand_colors.get('secondary'):
            color_guidance += f"Accent with {brand_colors['secondary']}. "

    return (
        f'Create a YouTube thumbnail image for a video about: "{subject}".\n'
        f"Style: {style_desc}. {color_guidance}\n"
        "The thumbnail should be visually striking, suitable for a 16:9 aspect ratio, "
        "and designed to attract clicks on social media.\n"
        "Do not include any text in the image - the text will be added separately.\n"
        "Focus on compelling imagery that conveys the topic visually."
    )


class ThumbnailGenerator:
    """Generate thumbnail images with DALL-E"""

    def __init__(self, api_key: Optional[str], client: Optional[OpenAI] = None):
        """
        Args:
            api_key: OpenAI API key
            client: Optional preconfigured OpenAI client

        Raises:
            ConfigurationError: If api_key is missing
        """
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY is not configured")

        self.client = client or OpenAI(api_key=api_key, timeout=Config.LONG_TIMEOUT)

    def generate(self, transcript: str, title: Optional[str] = None,
                 brand_colors: Optional[Dict[str, Optional[str]]] = None,
                 style: Optional[str] = None) -> ThumbnailResult:
        """Generate a thumbnail from transcript, title, colors and style"""
        prompt = build_thumbnail_prompt(transcript, title=title, brand_colors=brand_colors, style=style)
        return self.generate_from_prompt(prompt)

    def generate_from_prompt(self, prompt: str) -> ThumbnailResult:
        """
        Send a prompt to the image model as-is

        Raises:
            ThumbnailError: If the API call fails or returns no image
        """
        logger.info(f"🎨 Generating thumbnail ({len(prompt)} char prompt)")

        try:
            response = self.client.images.generate(
                model=Config.IMAGE_MODEL,
                prompt=prompt,
                n=1,
                size=Config.IMAGE_SIZE,
                quality=Config.IMAGE_QUALITY,
            )
        except Exception as e:
            logger.error(f"❌ DALL-E generation failed: {e}")
            raise ThumbnailError(f"DALL-E generation failed: {e}") from e

        if not response.data:
            raise ThumbnailError("No image data returned from DALL-E")

        image = response.data[0]
        logger.info("✅ Thumbnail generated")
        return ThumbnailResult(image_url=image.url, revised_prompt=image.revised_prompt)
