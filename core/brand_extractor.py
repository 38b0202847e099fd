#!/usr/bin/env python3
"""
Brand Extractor

Fetches a single marketing page and derives a best-effort brand profile
(name, description, logo, favicon, colors, keywords, tone).

Two independent passes run over the fetched page:
- structured queries against the parsed document (meta tags, links, title, body text)
- a raw-text scan of the unparsed HTML for CSS custom-property colors

Every field resolver is an ordered list of candidate lookups where the first
non-empty value wins. Only the fetch itself can fail the extraction.
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import requests
from bs4 import BeautifulSoup, Comment, Doctype

from core.config import Config
from core.exceptions import FetchError, ParseError
from core.url_normalizer import URLNormalizer

logger = logging.getLogger(__name__)


class Tone(str, Enum):
    """Single tone label inferred from page copy"""
    PROFESSIONAL = 'professional'
    CASUAL = 'casual'
    BOLD = 'bold'
    NEUTRAL = 'neutral'


# Checked in order, first set with any substring hit wins
TONE_KEYWORDS: List[Tuple[Tone, Tuple[str, ...]]] = [
    (Tone.PROFESSIONAL, ('professional', 'enterprise', 'business')),
    (Tone.CASUAL, ('fun', 'exciting', 'amazing')),
    (Tone.BOLD, ('innovative', 'cutting-edge', 'revolutionary')),
]

PRIMARY_COLOR_PATTERNS = [
    re.compile(r'--primary[-_]?color:\s*([^;]+)', re.IGNORECASE),
    re.compile(r'--brand[-_]?color:\s*([^;]+)', re.IGNORECASE),
    re.compile(r'--main[-_]?color:\s*([^;]+)', re.IGNORECASE),
    re.compile(r'--theme[-_]?color:\s*([^;]+)', re.IGNORECASE),
]

SECONDARY_COLOR_PATTERNS = [
    re.compile(r'--secondary[-_]?color:\s*([^;]+)', re.IGNORECASE),
    re.compile(r'--accent[-_]?color:\s*([^;]+)', re.IGNORECASE),
]

THEME_COLOR_META_PATTERN = re.compile(
    r'<meta[^>]*name=["\']theme-color["\'][^>]*content=["\']([^"\']+)["\']',
    re.IGNORECASE
)

DEFAULT_FAVICON_PATH = '/favicon.ico'

HEAD_ONLY_TAGS = {'head', 'title', 'style'}


@dataclass(frozen=True)
class BrandProfile:
    """Brand profile derived from one page; built once, never mutated"""
    name: Optional[str] = None
    description: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    logo_url: Optional[str] = None
    favicon: Optional[str] = None
    keywords: Optional[List[str]] = None
    tone: Tone = Tone.NEUTRAL

    def to_dict(self) -> Dict:
        """Serialize with the camelCase keys the web UI expects, omitting absent fields"""
        data = {
            'name': self.name,
            'description': self.description,
            'primaryColor': self.primary_color,
            'secondaryColor': self.secondary_color,
            'logoUrl': self.logo_url,
            'favicon': self.favicon,
            'keywords': list(self.keywords) if self.keywords is not None else None,
            'tone': self.tone.value,
        }
        return {key: value for key, value in data.items() if value is not None}


def first_present(resolvers: Sequence[Callable[[], Optional[str]]]) -> Optional[str]:
    """
    Return the first non-empty value produced by the resolvers, in order

    Resolvers after the first hit are never called.
    """
    for resolve in resolvers:
        value = resolve()
        if value:
            return value
    return None


# ---------- Document queries ----------

def _attr(soup: BeautifulSoup, selector: str, attribute: str) -> Optional[str]:
    element = soup.select_one(selector)
    if element is None:
        return None
    value = element.get(attribute)
    if isinstance(value, list):
        value = ' '.join(value)
    return value


def meta_content(soup: BeautifulSoup, selector: str) -> Optional[str]:
    """Content attribute of the first meta tag matching a CSS selector"""
    return _attr(soup, selector, 'content')


def link_href(soup: BeautifulSoup, selector: str) -> Optional[str]:
    """Href attribute of the first link tag matching a CSS selector"""
    return _attr(soup, selector, 'href')


def title_segment(soup: BeautifulSoup, separator: str) -> Optional[str]:
    """Trimmed <title> text before the first occurrence of separator"""
    title = soup.select_one('title')
    if title is None:
        return None
    return title.get_text().split(separator)[0].strip()


def resolve_name(soup: BeautifulSoup) -> Optional[str]:
    return first_present([
        lambda: meta_content(soup, 'meta[property="og:site_name"]'),
        lambda: meta_content(soup, 'meta[name="application-name"]'),
        lambda: title_segment(soup, '|'),
        lambda: title_segment(soup, '-'),
    ])


def resolve_description(soup: BeautifulSoup) -> str:
    return first_present([
        lambda: meta_content(soup, 'meta[property="og:description"]'),
        lambda: meta_content(soup, 'meta[name="description"]'),
    ]) or ''


def resolve_logo(soup: BeautifulSoup, page_url: str) -> str:
    logo = first_present([
        lambda: meta_content(soup, 'meta[property="og:image"]'),
        lambda: link_href(soup, 'link[rel="apple-touch-icon"]'),
        lambda: link_href(soup, 'link[rel="icon"][sizes="192x192"]'),
    ]) or ''
    return URLNormalizer.absolutize(logo, page_url)


def resolve_favicon(soup: BeautifulSoup, page_url: str) -> str:
    favicon = first_present([
        lambda: link_href(soup, 'link[rel="icon"]'),
        lambda: link_href(soup, 'link[rel="shortcut icon"]'),
    ]) or DEFAULT_FAVICON_PATH
    return URLNormalizer.absolutize(favicon, page_url)


def resolve_keywords(soup: BeautifulSoup) -> Optional[List[str]]:
    """
    Split the keywords meta on commas

    Returns:
        Trimmed non-empty tokens in source order, or None when the meta is absent
    """
    content = meta_content(soup, 'meta[name="keywords"]')
    if not content:
        return None
    return [token.strip() for token in content.split(',') if token.strip()]


def infer_tone(soup: BeautifulSoup) -> Tone:
    """Pick a tone from substrings of the lower-cased body text"""
    if soup.body is not None:
        body_text = soup.body.get_text().lower()
    else:
        # No <body> tag: keep only text outside head-level elements
        body_text = ''.join(
            text for text in soup.find_all(string=True)
            if not isinstance(text, (Comment, Doctype))
            and not any(parent.name in HEAD_ONLY_TAGS for parent in text.parents)
        ).lower()

    for tone, keywords in TONE_KEYWORDS:
        if any(keyword in body_text for keyword in keywords):
            return tone
    return Tone.NEUTRAL


# ---------- Raw HTML scan ----------

def _first_pattern_match(html: str, patterns: Sequence[re.Pattern]) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(html)
        if match:
            return match.group(1).strip()
    return None


def extract_colors(html: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Scan raw HTML for brand colors declared as CSS custom properties

    Custom properties inside <style> blocks or inline style attributes are not
    exposed consistently by the parsed document, so this works on the text.

    Returns:
        (primary, secondary); primary falls back to <meta name="theme-color">
    """
    primary = _first_pattern_match(html, PRIMARY_COLOR_PATTERNS)
    secondary = _first_pattern_match(html, SECONDARY_COLOR_PATTERNS)

    if not primary:
        theme_match = THEME_COLOR_META_PATTERN.search(html)
        if theme_match:
            primary = theme_match.group(1)

    return primary, secondary


# ---------- Extractor ----------

class BrandExtractor:
    """Fetch a brand website once and build a BrandProfile from it"""

    def __init__(self, session: Optional[requests.Session] = None, timeout: int = Config.CRAWL_TIMEOUT):
        """
        Args:
            session: Optional requests session to use (one is created per extractor otherwise)
            timeout: Request deadline in seconds
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        """
        Issue the single GET request for the page

        Raises:
            FetchError: On a non-success status or any network failure
        """
        try:
            response = self.session.get(url, headers=Config.get_default_headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"❌ Network error fetching {url}: {e}")
            raise FetchError(f"Crawl failed: {e}") from e

        if not 200 <= response.status_code < 400:
            logger.warning(f"❌ {url} returned HTTP {response.status_code}")
            raise FetchError(
                f"Failed to fetch website: {response.status_code} {response.reason or ''}".rstrip(),
                status_code=response.status_code
            )

        return response.text

    def extract(self, url: str) -> BrandProfile:
        """
        Derive a brand profile from a website

        Args:
            url: Website URL; https:// is assumed when no scheme is given

        Returns:
            BrandProfile with whatever fields could be found

        Raises:
            ValueError: If url is empty
            FetchError: If the page could not be retrieved
            ParseError: If the HTML could not be parsed
        """
        page_url = URLNormalizer.ensure_scheme(url)
        logger.info(f"🌐 Crawling brand website: {page_url}")

        html = self.fetch(page_url)

        try:
            soup = BeautifulSoup(html, 'html.parser')
        except Exception as e:
            raise ParseError(f"Could not parse HTML from {page_url}: {e}") from e

        primary_color, secondary_color = extract_colors(html)

        profile = BrandProfile(
            name=resolve_name(soup),
            description=resolve_description(soup),
            primary_color=primary_color,
            secondary_color=secondary_color,
            logo_url=resolve_logo(soup, page_url),
            favicon=resolve_favicon(soup, page_url),
            keywords=resolve_keywords(soup),
            tone=infer_tone(soup),
        )

        logger.info(f"✅ Extracted brand '{profile.name or 'Unknown Brand'}' (tone: {profile.tone.value})")
        return profile


def extract_brand(url: str, session: Optional[requests.Session] = None) -> BrandProfile:
    """Convenience wrapper: extract a brand profile with a fresh extractor"""
    return BrandExtractor(session=session).extract(url)
